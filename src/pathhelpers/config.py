# ============================================================================
# FILE: config.py
# RELPATH: search_path_helpers/src/pathhelpers/config.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Configuration manager with default back-fill and validation
# ============================================================================

"""
Configuration Manager for Search Path Helpers.

Handles loading, saving and validating the JSON configuration used by the
command line front end: which path flavor to apply and whether to write a
session log. Keys missing from a file are filled from the defaults; unknown
keys are kept so newer files survive a round trip through older code.
"""

import json
from pathlib import Path
from typing import Any, Dict

from pathhelpers.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError
)
from pathhelpers.roots import DEFAULT_FLAVOR, available_flavors


class ConfigManager:
    """
    Manages application configuration.

    Values are addressed with dot-notation paths such as ``paths.flavor``.
    """

    DEFAULT_CONFIG = {
        "paths": {
            "flavor": DEFAULT_FLAVOR
        },
        "logging": {
            "enabled": False,
            "log_dir": "logs"
        }
    }

    def __init__(self, config_file: str = "path_helpers_config.json", create_if_missing: bool = True):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to configuration file
            create_if_missing: Write a default file when none exists; when
                False the defaults are only held in memory
        """
        self.config_file = Path(config_file)
        self.create_if_missing = create_if_missing
        self.config: Dict = {}
        self.loaded_from_file = False
        self._load_or_create()

    def _load_or_create(self) -> None:
        """Load existing config or create default."""
        if self.config_file.exists():
            self.load()
        else:
            self.config = self._deep_copy(self.DEFAULT_CONFIG)
            if self.create_if_missing:
                self.save()

    def load(self) -> Dict:
        """
        Load configuration from file.

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigLoadError: If file cannot be loaded or parsed
        """
        try:
            text = self.config_file.read_text(encoding='utf-8')
            data = json.loads(text)
        except FileNotFoundError:
            raise ConfigLoadError(str(self.config_file), "File not found")
        except json.JSONDecodeError as e:
            raise ConfigLoadError(str(self.config_file), f"Invalid JSON: {str(e)}")
        except OSError as e:
            raise ConfigLoadError(str(self.config_file), str(e))

        if not isinstance(data, dict):
            raise ConfigLoadError(str(self.config_file), "Top-level value must be an object")

        self.config = self._merge_defaults(self._deep_copy(self.DEFAULT_CONFIG), data)
        self.loaded_from_file = True
        return self.config

    def save(self) -> None:
        """
        Save configuration to file.

        Raises:
            ConfigError: If file cannot be written
        """
        try:
            text = json.dumps(self.config, indent=2, ensure_ascii=False)
            self.config_file.write_text(text, encoding='utf-8')
        except OSError as e:
            raise ConfigError(f"Failed to save config: {str(e)}")

    def _merge_defaults(self, defaults: Dict, loaded: Dict) -> Dict:
        """Overlay loaded values onto defaults, keeping unknown keys."""
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(defaults.get(key), dict):
                defaults[key] = self._merge_defaults(defaults[key], value)
            else:
                defaults[key] = value
        return defaults

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot-notation path.

        Args:
            key_path: Dot-separated path (e.g., 'paths.flavor')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config

        for key in key_path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any) -> None:
        """
        Set configuration value using dot-notation path.

        Args:
            key_path: Dot-separated path
            value: Value to set
        """
        keys = key_path.split('.')
        target = self.config

        for key in keys[:-1]:
            if key not in target:
                target[key] = {}
            target = target[key]

        target[keys[-1]] = value

    def validate(self) -> bool:
        """
        Validate configuration against schema.

        Returns:
            True if valid

        Raises:
            ConfigValidationError: If validation fails
        """
        for section in ("paths", "logging"):
            if not isinstance(self.config.get(section), dict):
                raise ConfigValidationError(
                    section,
                    None,
                    f"Required section '{section}' missing"
                )

        self._validate_flavor()
        self._validate_logging_enabled()
        self._validate_log_dir()

        return True

    def _validate_flavor(self) -> None:
        """Validate paths.flavor value."""
        value = self.get('paths.flavor')
        valid_flavors = available_flavors()
        if value not in valid_flavors:
            raise ConfigValidationError(
                'paths.flavor',
                value,
                f"Must be one of: {', '.join(valid_flavors)}"
            )

    def _validate_logging_enabled(self) -> None:
        value = self.get('logging.enabled')
        if not isinstance(value, bool):
            raise ConfigValidationError('logging.enabled', value, "Must be true or false")

    def _validate_log_dir(self) -> None:
        value = self.get('logging.log_dir')
        if not isinstance(value, str) or not value.strip():
            raise ConfigValidationError('logging.log_dir', value, "Must be a non-empty string")

    def _deep_copy(self, obj: Any) -> Any:
        """Deep copy a configuration object."""
        if isinstance(obj, dict):
            return {k: self._deep_copy(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._deep_copy(item) for item in obj]
        else:
            return obj

    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self.config = self._deep_copy(self.DEFAULT_CONFIG)
        self.save()

    def export_dict(self) -> Dict:
        """
        Export configuration as dictionary.

        Returns:
            Deep copy of configuration
        """
        return self._deep_copy(self.config)


# ============================================================================
# LIFECYCLE STATUS: Proposed
# DEPENDENCIES: exceptions.py, roots.py
# TESTS: tests/unit/test_config.py
# ============================================================================
