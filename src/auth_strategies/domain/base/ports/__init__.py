"""Port interfaces shared between strategies and the host layer."""

from .auth_port import AuthContext, AuthResult, AuthStatus, StrategyPort

__all__ = ["AuthContext", "AuthResult", "AuthStatus", "StrategyPort"]
