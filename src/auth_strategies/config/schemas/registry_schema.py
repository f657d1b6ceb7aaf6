"""Strategy registry configuration schema."""
import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level name")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib log record format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level against the stdlib level names."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class StrategyEntryConfig(BaseModel):
    """A strategy to register at startup."""
    model_config = ConfigDict(extra="forbid")

    label: str = Field(..., min_length=1, description="Label the strategy is registered under")
    path: str = Field(
        ..., min_length=1, description="Import path, 'package.module:ClassName' or dotted"
    )
    enabled: bool = Field(True, description="Register this strategy")


class RegistryConfig(BaseModel):
    """Strategy registry configuration."""
    model_config = ConfigDict(extra="forbid")

    strategies: List[StrategyEntryConfig] = Field(
        default_factory=list, description="Strategies to register at startup"
    )
    warn_on_override: bool = Field(
        True, description="Log a warning when a label is registered twice"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    @model_validator(mode="after")
    def validate_unique_labels(self) -> "RegistryConfig":
        """Reject configs that name the same label twice."""
        seen = set()
        for entry in self.strategies:
            if entry.label in seen:
                raise ValueError(f"Duplicate strategy label in configuration: {entry.label}")
            seen.add(entry.label)
        return self
