"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (VNOTE_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config(config_file="~/.vnote/config.yaml")

    config.get("book.default")       # dot-notation access
    config.get_data_dir()            # resolved notebook directory
"""

import json
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError

_DEFAULT_ENV_PREFIX = "VNOTE_"
_DEFAULT_DATA_DIR_NAME = ".vnote"
DEFAULT_BOOK_NAME = "notes"
DEFAULT_CONFIG_NAME = "config.yaml"


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    VNOTE_BOOK__DEFAULT=work -> config["book"]["default"] = "work"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        data_dir: str | None = None,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            data_dir: Directory holding notebooks. Defaults to ~/.vnote.
            defaults: Additional default values to merge.
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.env_prefix = env_prefix or ""
        self._data_dir = data_dir or os.path.join("~", _DEFAULT_DATA_DIR_NAME)
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    def _get_default_config(self) -> dict[str, Any]:
        data_dir = os.path.expanduser(self._data_dir)
        return {
            "paths": {
                "data_dir": data_dir,
            },
            "book": {
                "default": DEFAULT_BOOK_NAME,
                "extension": ".yaml",
            },
            "search": {
                "similarity_threshold": 0.7,
            },
            "logging": {
                "level": "WARNING",
                "file": "",
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path, encoding="utf-8") as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                elif ext == ".json":
                    data = json.load(f)
                else:
                    return {}
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot load config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.data_dir", "book.default"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def get_data_dir(self) -> str:
        """Return the resolved notebook directory path."""
        return os.path.expanduser(self.get("paths.data_dir", self._data_dir))

    def get_default_book(self) -> str:
        return str(self.get("book.default") or DEFAULT_BOOK_NAME)

    def get_similarity_threshold(self) -> float:
        """Return the topic-matching threshold as a float in [0, 1]."""
        raw = self.get("search.similarity_threshold", 0.7)
        try:
            value = float(raw)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"search.similarity_threshold must be a number, got {raw!r}") from e
        if not 0.0 <= value <= 1.0:
            raise ConfigurationError(f"search.similarity_threshold must be between 0 and 1, got {value}")
        return value

    def ensure_config_file(self) -> bool:
        """Write the default config to ``config_file`` if it does not exist yet.

        Returns True when a new file was written.
        """
        if not self.config_file or os.path.exists(self.config_file):
            return False

        # Built-in values only; env overrides apply to this run, not to the saved file
        builtin = self._get_default_config()
        self._update_dict(builtin, self._extra_defaults)
        defaults = {
            "book": {"default": builtin["book"]["default"]},
            "search": {"similarity_threshold": builtin["search"]["similarity_threshold"]},
        }
        try:
            os.makedirs(os.path.dirname(self.config_file) or ".", exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as f:
                yaml.safe_dump(defaults, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigurationError(f"Cannot write config file {self.config_file}: {e}") from e
        return True

