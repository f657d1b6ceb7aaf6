"""Core domain components."""

from .exceptions import (
    AuthStrategyError,
    ConfigurationError,
    ContractViolationError,
    MissingCapabilityError,
    StrategyRegistrationError,
)

__all__ = [
    "AuthStrategyError",
    "StrategyRegistrationError",
    "MissingCapabilityError",
    "ContractViolationError",
    "ConfigurationError",
]
