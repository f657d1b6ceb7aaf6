# src/auth_strategies/domain/core/exceptions.py
from typing import Any, Hashable, Optional


class AuthStrategyError(Exception):
    """Base exception for all auth strategy errors."""
    pass


class StrategyRegistrationError(AuthStrategyError):
    """Raised when a strategy cannot be admitted to a registry."""
    def __init__(self, label: Hashable, message: str):
        super().__init__(message)
        self.label = label


class MissingCapabilityError(StrategyRegistrationError, AttributeError):
    """Raised when a strategy does not declare a required operation."""
    def __init__(self, label: Hashable, capability: str = "authenticate"):
        super().__init__(
            label, f"{capability} is not declared in the {label!r} strategy"
        )
        self.capability = capability


class ContractViolationError(StrategyRegistrationError, TypeError):
    """Raised when a strategy does not derive from BaseStrategy."""
    def __init__(self, label: Hashable):
        super().__init__(label, f"{label!r} is not a Strategy")


class ConfigurationError(AuthStrategyError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details
