"""
auth-strategies - pluggable authentication strategy registry.

Register strategies by label and resolve them when handling a request:

    from auth_strategies import BaseStrategy, add, lookup

    class TokenStrategy(BaseStrategy):
        def authenticate(self):
            ...

    add("token", TokenStrategy)
    strategy = lookup("token")(context)

The module-level add, lookup and clear operate on the process-wide
registry. Hosts that prefer to own their registry can construct a
StrategyRegistry directly.
"""

from typing import Hashable, Mapping, Optional, Type

from .domain.base.ports import AuthContext, AuthResult, AuthStatus, StrategyPort
from .domain.core.exceptions import (
    AuthStrategyError,
    ConfigurationError,
    ContractViolationError,
    MissingCapabilityError,
    StrategyRegistrationError,
)
from .infrastructure.auth import (
    BaseStrategy,
    StrategyRegistry,
    get_strategy_registry,
    register_from_config,
    reset_strategy_registry,
)
from .infrastructure.auth.registry import StrategyBody

__version__ = "0.1.0"


def add(
    label: Hashable,
    strategy: Optional[Type[BaseStrategy]] = None,
    body: StrategyBody = None,
) -> Type[BaseStrategy]:
    """Register a strategy with the process-wide registry."""
    return get_strategy_registry().add(label, strategy, body)


def lookup(label: Hashable) -> Optional[Type[BaseStrategy]]:
    """Resolve a strategy from the process-wide registry, None if unknown."""
    return get_strategy_registry().lookup(label)


def clear() -> None:
    """Remove every strategy from the process-wide registry."""
    get_strategy_registry().clear()


def all_strategies() -> Mapping[Hashable, Type[BaseStrategy]]:
    """Read-only view of the process-wide registry's label to strategy mapping."""
    return get_strategy_registry().all_strategies()


__all__ = [
    "add",
    "lookup",
    "clear",
    "all_strategies",
    "AuthContext",
    "AuthResult",
    "AuthStatus",
    "StrategyPort",
    "BaseStrategy",
    "StrategyRegistry",
    "get_strategy_registry",
    "reset_strategy_registry",
    "register_from_config",
    "AuthStrategyError",
    "StrategyRegistrationError",
    "MissingCapabilityError",
    "ContractViolationError",
    "ConfigurationError",
]
