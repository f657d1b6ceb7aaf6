# src/auth_strategies/config/manager.py
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from auth_strategies.config.schemas.registry_schema import RegistryConfig
from auth_strategies.domain.core.exceptions import ConfigurationError

CONFIG_PATH_ENV = "AUTH_STRATEGIES_CONFIG"
LOG_LEVEL_ENV = "AUTH_STRATEGIES_LOG_LEVEL"


class ConfigurationManager:
    """
    Loads and validates the strategy registry configuration.

    Sources, lowest precedence first: the JSON file (explicit path or
    AUTH_STRATEGIES_CONFIG), the overrides dict, then environment overrides.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        self._config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
        self._overrides = overrides or {}
        self._config: Optional[RegistryConfig] = None

    def get_config(self) -> RegistryConfig:
        """Return the validated configuration, loading it on first use."""
        if self._config is None:
            self._config = self._load()
        return self._config

    def reload(self) -> RegistryConfig:
        self._config = None
        return self.get_config()

    def _load(self) -> RegistryConfig:
        raw = self._read_file() if self._config_path else {}
        raw.update(self._overrides)

        log_level = os.environ.get(LOG_LEVEL_ENV)
        if log_level:
            raw["logging"] = {**raw.get("logging", {}), "level": log_level}

        try:
            return RegistryConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError("Invalid strategy registry configuration", e.errors()) from e

    def _read_file(self) -> Dict[str, Any]:
        path = Path(os.path.expandvars(str(self._config_path)))
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data
