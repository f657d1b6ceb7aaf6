"""Base authentication strategy.

Every strategy admitted to a StrategyRegistry derives from BaseStrategy.
Subclasses must implement authenticate() and may override is_applicable().
Inside authenticate() a strategy records its outcome with success(),
fail() or skip(); the host reads it back through run().
"""

from abc import abstractmethod
from typing import Any, Dict, Hashable, List, Optional

from auth_strategies.domain.base.ports.auth_port import (
    AuthContext,
    AuthResult,
    AuthStatus,
    StrategyPort,
)


class BaseStrategy(StrategyPort):
    """Base class for all authentication strategies."""

    label: Optional[Hashable] = None

    def __init__(self, context: AuthContext):
        """
        Initialize strategy for a single request.

        Args:
            context: Request context supplied by the host layer
        """
        self.context = context
        self.headers: Dict[str, str] = {}
        self.result: Optional[AuthResult] = None
        self.halted = False
        self.performed = False

    @abstractmethod
    def authenticate(self) -> Any:
        """Perform authentication and record the outcome."""

    def is_applicable(self) -> bool:
        return True

    def success(
        self,
        user_id: str,
        roles: Optional[List[str]] = None,
        permissions: Optional[List[str]] = None,
        message: Optional[str] = None,
        **metadata: Any,
    ) -> AuthResult:
        """Record a successful authentication and halt the chain."""
        self.halt()
        self.result = AuthResult(
            status=AuthStatus.SUCCESS,
            user_id=user_id,
            user_roles=list(roles or []),
            permissions=list(permissions or []),
            message=message,
            metadata={"strategy": self.label, **metadata},
        )
        return self.result

    def fail(self, message: Optional[str] = None, **metadata: Any) -> AuthResult:
        """Record a failed authentication and halt the chain."""
        self.halt()
        self.result = AuthResult(
            status=AuthStatus.FAILURE,
            message=message,
            metadata={"strategy": self.label, **metadata},
        )
        return self.result

    def skip(self, message: Optional[str] = None) -> AuthResult:
        """Record that this strategy did not handle the request."""
        self.result = AuthResult(
            status=AuthStatus.SKIPPED,
            message=message,
            metadata={"strategy": self.label},
        )
        return self.result

    def halt(self) -> None:
        self.halted = True

    def run(self) -> AuthResult:
        """
        Run authenticate() once and return the recorded result.

        Returns:
            The recorded result, SKIPPED if authenticate recorded nothing
        """
        if not self.performed:
            self.performed = True
            self.authenticate()
            if self.result is None:
                self.skip()
        return self.result
