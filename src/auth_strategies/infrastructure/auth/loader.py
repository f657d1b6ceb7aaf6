"""Configuration-driven strategy registration."""

import importlib
from typing import Any, List

from auth_strategies.config.schemas.registry_schema import RegistryConfig
from auth_strategies.domain.core.exceptions import ConfigurationError, StrategyRegistrationError
from auth_strategies.infrastructure.auth.registry import StrategyRegistry
from auth_strategies.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


def import_strategy(path: str) -> Any:
    """
    Import an object from 'package.module:Name' or 'package.module.Name'.

    Raises:
        ConfigurationError: If the module or attribute cannot be resolved
    """
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")

    if not module_name or not attr_path:
        raise ConfigurationError(f"Invalid strategy import path: {path}")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import module '{module_name}' for strategy {path}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ConfigurationError(f"Module '{module_name}' has no attribute '{attr_path}'") from e
    return target


def register_from_config(
    registry: StrategyRegistry, config: RegistryConfig, configure_logging: bool = True
) -> List[str]:
    """
    Register every enabled strategy named in the configuration.

    All entries are imported and validated before the registry is touched,
    so a bad entry leaves the registry and its settings as they were.

    Args:
        registry: Registry to add strategies to
        config: Validated registry configuration
        configure_logging: Apply config.logging through setup_logging

    Returns:
        Labels that were registered, in configuration order

    Raises:
        ConfigurationError: If an import path cannot be resolved
        StrategyRegistrationError: If an entry is not a valid strategy
    """
    resolved = []
    for entry in config.strategies:
        if not entry.enabled:
            logger.debug("Skipping disabled auth strategy", label=entry.label)
            continue
        strategy = import_strategy(entry.path)
        try:
            StrategyRegistry.validate(entry.label, strategy)
        except StrategyRegistrationError as e:
            logger.error("Rejected configured auth strategy", label=entry.label, error=str(e))
            raise
        resolved.append((entry.label, strategy))

    if configure_logging:
        setup_logging(config.logging)

    registry.warn_on_override = config.warn_on_override
    for label, strategy in resolved:
        registry.add(label, strategy)
    return [label for label, _ in resolved]
