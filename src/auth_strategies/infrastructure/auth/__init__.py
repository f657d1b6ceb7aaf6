"""Authentication infrastructure components."""

from .base_strategy import BaseStrategy
from .loader import import_strategy, register_from_config
from .registry import StrategyRegistry, get_strategy_registry, reset_strategy_registry

__all__: list[str] = [
    "BaseStrategy",
    "StrategyRegistry",
    "get_strategy_registry",
    "reset_strategy_registry",
    "import_strategy",
    "register_from_config",
]
