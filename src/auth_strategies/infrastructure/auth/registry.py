"""Authentication strategy registry."""

import inspect
import re
import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Type

from auth_strategies.domain.core.exceptions import (
    ContractViolationError,
    MissingCapabilityError,
    StrategyRegistrationError,
)
from auth_strategies.infrastructure.auth.base_strategy import BaseStrategy
from auth_strategies.infrastructure.logging.logger import get_logger

StrategyBody = Any  # callable used as authenticate, or a class namespace mapping


class StrategyRegistry:
    """
    Registry mapping labels to authentication strategy classes.

    Every admitted class derives from BaseStrategy and declares a concrete
    authenticate(). Re-registering a label replaces the previous entry.
    """

    def __init__(self, warn_on_override: bool = True):
        """
        Initialize strategy registry.

        Args:
            warn_on_override: Log a warning when an existing label is replaced
        """
        self._strategies: Optional[Dict[Hashable, Type[BaseStrategy]]] = None
        self._lock = threading.RLock()
        self.warn_on_override = warn_on_override
        self.logger = get_logger(__name__)

    def add(
        self,
        label: Hashable,
        strategy: Optional[Type[BaseStrategy]] = None,
        body: StrategyBody = None,
    ) -> Type[BaseStrategy]:
        """
        Register an authentication strategy.

        Args:
            label: Name the strategy is looked up by
            strategy: Strategy class deriving from BaseStrategy. When omitted,
                a subclass of BaseStrategy is built from body.
            body: Callable used as authenticate(self), or a mapping used as
                the namespace of the synthesized class

        Returns:
            The registered strategy class

        Raises:
            MissingCapabilityError: If authenticate is not declared
            ContractViolationError: If the strategy does not derive from BaseStrategy
        """
        if label is None:
            raise ValueError("Strategy label must not be None")

        if strategy is None:
            strategy = self._synthesize(label, body)

        try:
            self.validate(label, strategy)
        except StrategyRegistrationError as e:
            self.logger.error("Rejected auth strategy", label=label, error=str(e))
            raise

        with self._lock:
            strategies = self._all()
            if label in strategies and self.warn_on_override:
                self.logger.warning(
                    "Overriding existing auth strategy",
                    label=label,
                    previous=strategies[label].__name__,
                )
            strategies[label] = strategy

        self.logger.info("Registered auth strategy", label=label, strategy=strategy.__name__)
        return strategy

    def strategy(self, label: Hashable) -> Callable[[Any], Type[BaseStrategy]]:
        """
        Decorator form of add.

        Applied to a class, registers it as is. Applied to a function,
        registers a synthesized strategy using the function as authenticate;
        the decorated name is bound to the resulting class.
        """

        def decorator(target: Any) -> Type[BaseStrategy]:
            if inspect.isclass(target):
                return self.add(label, target)
            return self.add(label, body=target)

        return decorator

    def lookup(self, label: Hashable) -> Optional[Type[BaseStrategy]]:
        """
        Get the strategy registered under a label.

        Labels are hashable; an unhashable label can never have been
        registered and resolves to None.

        Returns:
            Strategy class, or None if the label is not registered
        """
        with self._lock:
            try:
                strategy = self._all().get(label)
            except TypeError:
                strategy = None
        if strategy is None:
            self.logger.debug("Auth strategy not found", label=label)
        return strategy

    def clear(self) -> None:
        """Discard every registered strategy."""
        with self._lock:
            self._strategies = {}
        self.logger.info("Cleared auth strategies")

    def all_strategies(self) -> Mapping[Hashable, Type[BaseStrategy]]:
        """Read-only view of the label to strategy mapping."""
        with self._lock:
            return MappingProxyType(self._all())

    def labels(self) -> List[Hashable]:
        with self._lock:
            return list(self._all().keys())

    def __contains__(self, label: Hashable) -> bool:
        with self._lock:
            return label in self._all()

    def __len__(self) -> int:
        with self._lock:
            return len(self._all())

    def _all(self) -> Dict[Hashable, Type[BaseStrategy]]:
        if self._strategies is None:
            self._strategies = {}
        return self._strategies

    @staticmethod
    def validate(label: Hashable, strategy: Any) -> None:
        """
        Check that a strategy may be admitted under a label.

        Raises:
            MissingCapabilityError: If authenticate is not declared
            ContractViolationError: If the strategy does not derive from BaseStrategy
        """
        authenticate = getattr(strategy, "authenticate", None)
        if not callable(authenticate) or getattr(authenticate, "__isabstractmethod__", False):
            raise MissingCapabilityError(label, "authenticate")
        if not (inspect.isclass(strategy) and issubclass(strategy, BaseStrategy)):
            raise ContractViolationError(label)

    @staticmethod
    def _synthesize(label: Hashable, body: StrategyBody) -> Type[BaseStrategy]:
        if body is None:
            namespace: Dict[str, Any] = {}
        elif isinstance(body, Mapping):
            namespace = dict(body)
        elif callable(body):
            namespace = {"authenticate": body}
            if getattr(body, "__doc__", None):
                namespace["__doc__"] = body.__doc__
        else:
            raise TypeError(
                f"Strategy body for {label!r} must be a callable or a mapping, "
                f"got {type(body).__name__}"
            )

        namespace["label"] = label
        return type(_class_name(label), (BaseStrategy,), namespace)


def _class_name(label: Hashable) -> str:
    parts = re.split(r"[^0-9a-zA-Z]+", str(label))
    name = "".join(part[:1].upper() + part[1:] for part in parts if part)
    if not name or name[0].isdigit():
        name = f"Anonymous{name}"
    return f"{name}Strategy"


# Global registry instance
_strategy_registry: Optional[StrategyRegistry] = None
_registry_lock = threading.Lock()


def get_strategy_registry() -> StrategyRegistry:
    """
    Get the process-wide strategy registry, creating it on first use.

    Returns:
        Global strategy registry
    """
    global _strategy_registry

    if _strategy_registry is None:
        with _registry_lock:
            if _strategy_registry is None:
                _strategy_registry = StrategyRegistry()

    return _strategy_registry


def reset_strategy_registry() -> None:
    """Drop the process-wide registry so the next access starts empty."""
    global _strategy_registry

    with _registry_lock:
        _strategy_registry = None
