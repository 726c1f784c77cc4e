import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .config import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_LOG_LEVEL,
    MODULE_DEFINITION_TAG,
    MODULE_TAG,
    LogLevel,
)

_DEFAULTS: Dict[str, Any] = {
    'module_tag': MODULE_TAG,
    'module_definition_tag': MODULE_DEFINITION_TAG,
    'log_level': DEFAULT_LOG_LEVEL.value,
    'log_dir': '.',
}


class PluginConfig:
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    @classmethod
    def reset(cls):
        """Forget the loaded configuration so the next access re-reads it."""
        cls._instance = None

    @staticmethod
    def _get_config_path() -> Optional[Path]:
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override)
        config_path = Path.cwd() / CONFIG_FILENAME
        return config_path if config_path.exists() else None

    def _load_config(self):
        self._config = dict(_DEFAULTS)

        config_path = self._get_config_path()
        if config_path is None:
            return
        if not config_path.exists():
            raise FileNotFoundError(f"{CONFIG_FILENAME} not found at {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid configuration file {config_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {config_path} must contain a JSON object")
        self._config.update(loaded)

    def get(self, key: str) -> Any:
        if key not in self._config:
            raise KeyError(f"Setting '{key}' not found in {CONFIG_FILENAME}")
        return self._config[key]

    @property
    def module_tag(self) -> str:
        return self.get('module_tag')

    @property
    def module_definition_tag(self) -> str:
        return self.get('module_definition_tag')

    @property
    def log_level(self) -> LogLevel:
        return LogLevel(self.get('log_level'))

    @property
    def log_dir(self) -> Path:
        return Path(self.get('log_dir'))
