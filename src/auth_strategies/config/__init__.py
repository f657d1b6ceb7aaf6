"""Configuration package."""

from .schemas import LoggingConfig, RegistryConfig, StrategyEntryConfig

__all__ = ["LoggingConfig", "RegistryConfig", "StrategyEntryConfig"]
