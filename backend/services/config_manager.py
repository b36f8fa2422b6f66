"""
Configuration Manager - Persist backend settings and workspace state
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _merge(defaults: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay overrides onto a copy of defaults"""
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1. Environment variable, 2. ~/.devkit, 3. temp directory
        config_dir = os.environ.get("DEVKIT_CONFIG_DIR") or os.path.expanduser("~/.devkit")

        try:
            config_path = Path(config_dir)
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("[ConfigManager] Cannot write to %s: %s", config_dir, e)
            tmp_dir = Path(tempfile.gettempdir()) / "devkit"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.warning("[ConfigManager] Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling gaps from defaults"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("[ConfigManager] Error loading config: %s", e)
            return self._default_config()

        if not isinstance(stored, dict):
            logger.warning("[ConfigManager] Ignoring config that is not a JSON object")
            return self._default_config()
        return _merge(self._default_config(), stored)

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "server": {"host": "127.0.0.1", "port": 8000},
            "diff": {"maxEditCost": 1024, "contextLines": 3},
            "regex": {"backend": "re"},
            "workspace": {"activeView": "json", "scratchpad": ""},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Merge config into the current settings and write them to file"""
        self._config = _merge(self._config, config)
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    # ========== Workspace State ==========

    def get_workspace(self) -> dict[str, Any]:
        """Active view and scratchpad note, as last saved"""
        return self.get_config()["workspace"]

    def update_workspace(self, **changes: Any) -> dict[str, Any]:
        """Persist the given workspace keys and return the new state"""
        self.save_config({"workspace": changes})
        return copy.deepcopy(self._config["workspace"])

    def clear_scratchpad(self) -> dict[str, Any]:
        return self.update_workspace(scratchpad="")
