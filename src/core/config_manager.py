"""Configuration Manager for Console Kit"""

import copy
import logging
from pathlib import Path
from typing import Any, cast

import yaml

DEFAULT_SETTINGS: dict[str, Any] = {
    "ui": {
        "route_name": "console",
        "confirm_label": "OK",
        "cancel_label": "Cancel",
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}


class ConfigManager:
    """Loads UI settings from ``config/settings.yaml``, falling back to defaults"""

    def __init__(self, config_dir: str | None = None):
        self.config_dir = Path(config_dir or Path(__file__).parent.parent.parent / "config")
        self.settings_file = self.config_dir / "settings.yaml"

        if not self.settings_file.exists():
            example = self.config_dir / "settings.yaml.example"
            logging.info(f"No settings found at {self.settings_file}, using defaults (see {example})")

        self.settings = self._merge(DEFAULT_SETTINGS, self._load_yaml(self.settings_file))

    def _load_yaml(self, file_path: Path) -> dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        with open(file_path) as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _merge(cls, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge *override* into a copy of *base*."""
        merged = copy.deepcopy(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = cls._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value with optional default

        Args:
            key: Setting key (supports nested keys with dot notation, e.g., 'ui.route_name')
            default: Default value if setting not found

        Returns:
            Setting value or default
        """
        keys = key.split(".")
        value: Any = self.settings

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value if value is not None else default

    def get_ui_settings(self) -> dict[str, Any]:
        """Get the ``ui`` section (route name, default dialog labels)"""
        return cast("dict[str, Any]", self.settings.get("ui", {}))
