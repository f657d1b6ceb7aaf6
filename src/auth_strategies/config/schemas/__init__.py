"""Configuration schemas package."""

from .registry_schema import LoggingConfig, RegistryConfig, StrategyEntryConfig

__all__ = [
    "RegistryConfig",
    "StrategyEntryConfig",
    "LoggingConfig",
]
