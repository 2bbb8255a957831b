#!/usr/bin/env python3
"""
bricklayer Configuration Management
"""

import copy
import os
from typing import Any

from .config_store import ConfigStore
from .exceptions import ConfigError

LOG_LEVEL_ENV = "BRICKLAYER_LOG_LEVEL"


class Config:
    """Configuration manager for bricklayer"""

    DEFAULT_CONFIG: dict[str, Any] = {
        "pipeline": {"bricks": []},
        "params": {},
        "logging": {"level": "INFO", "file": None},
    }

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path

        if self.config_path:
            self.load_config()

        self.validate()

        env_level = os.getenv(LOG_LEVEL_ENV, "").strip()
        if env_level:
            self.set("logging", "level", env_level.upper())

    def load_config(self) -> None:
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        self._merge_config(user_config)

    def save_config(self, path: str | None = None) -> None:
        """Save configuration to file"""
        target = path or self.config_path
        if not target:
            raise ConfigError("No config path to save to")
        ConfigStore.save(target, self.config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if isinstance(settings, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Merge overrides into the current configuration and re-validate"""
        self._merge_config(overrides)
        self.validate()

    def validate(self) -> None:
        pipeline = self.config.get("pipeline")
        if not isinstance(pipeline, dict):
            raise ConfigError("'pipeline' section must be an object")
        bricks = pipeline.get("bricks", [])
        if not isinstance(bricks, list) or not all(isinstance(b, str) for b in bricks):
            raise ConfigError("'pipeline.bricks' must be a list of brick names")
        if not isinstance(self.config.get("params"), dict):
            raise ConfigError("'params' section must be an object")
        if not isinstance(self.config.get("logging"), dict):
            raise ConfigError("'logging' section must be an object")

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value) -> None:
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.config)

    @property
    def brick_names(self) -> list[str]:
        return list(self.get("pipeline", "bricks", []))

    @property
    def initial_params(self) -> dict[str, Any]:
        """Fresh params bag seeded from the 'params' section"""
        return copy.deepcopy(self.config["params"])

    @property
    def log_level(self) -> str:
        return str(self.get("logging", "level", "INFO")).upper()

    @property
    def log_file(self) -> str | None:
        return self.get("logging", "file")

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
