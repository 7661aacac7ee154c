"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/config.py
Version:        1.0.0
Description:    Manages application configuration using QSettings. Holds the
                filter debounce policy, logging levels and the per-environment
                menu state (collapsed folders, disabled routes).
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from PyQt6.QtCore import QSettings, QStandardPaths

from core.logger import get_logger, setup_logging

logger = get_logger("config")


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via class methods or single instance.
    """

    KEY_DEBOUNCE_MS: str = "debounce_ms"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"
    KEY_COLLAPSED_FOLDERS: str = "collapsed_folders"
    KEY_DISABLED_ROUTES: str = "disabled_routes"

    # Defaults
    DEFAULT_DEBOUNCE_MS: int = 100
    DEFAULT_LOG_LEVEL: str = "WARNING"

    APP_ID: str = "routeflux"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings are isolated (e.g. routeflux-dev).
        """
        # If no profile provided, use the last active one
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/routeflux[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def _get_json(self, group: str, key: str) -> Dict[str, Any]:
        raw = str(self._get_setting(group, key, "{}"))
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed JSON in setting {group}/{key}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring non-object JSON in setting {group}/{key}")
            return {}
        return data

    def get_debounce_ms(self) -> int:
        """
        Retrieves the filter debounce window in milliseconds.

        Returns:
            The debounce window, never negative.
        """
        raw = self._get_setting("Filter", self.KEY_DEBOUNCE_MS, self.DEFAULT_DEBOUNCE_MS)
        try:
            return max(0, int(raw))
        except (TypeError, ValueError):
            logger.warning(f"Invalid debounce value {raw!r}, using default")
            return self.DEFAULT_DEBOUNCE_MS

    def set_debounce_ms(self, value: int) -> None:
        """
        Saves the filter debounce window in milliseconds.

        Args:
            value: The debounce window.
        """
        self._set_setting("Filter", self.KEY_DEBOUNCE_MS, int(value))

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> dict:
        """Retrieves a dictionary of component-specific log levels."""
        return self._get_json("Logging", self.KEY_LOG_COMPONENTS)

    def set_log_components(self, components: dict) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "app.log"

    def get_collapsed_folders(self, environment_uuid: str) -> List[str]:
        """Folder uuids collapsed in the routes menu of an environment."""
        return list(self._get_json("Menu", self.KEY_COLLAPSED_FOLDERS).get(environment_uuid, []))

    def set_collapsed_folders(self, environment_uuid: str, folder_uuids: List[str]) -> None:
        data = self._get_json("Menu", self.KEY_COLLAPSED_FOLDERS)
        data[environment_uuid] = list(folder_uuids)
        self._set_setting("Menu", self.KEY_COLLAPSED_FOLDERS, json.dumps(data))

    def get_disabled_routes(self, environment_uuid: str) -> List[str]:
        """Route uuids toggled off in an environment."""
        return list(self._get_json("Menu", self.KEY_DISABLED_ROUTES).get(environment_uuid, []))

    def set_disabled_routes(self, environment_uuid: str, route_uuids: List[str]) -> None:
        data = self._get_json("Menu", self.KEY_DISABLED_ROUTES)
        data[environment_uuid] = list(route_uuids)
        self._set_setting("Menu", self.KEY_DISABLED_ROUTES, json.dumps(data))


def configure_logging(app_config: AppConfig) -> None:
    """
    Applies the configured log level, component overrides and log file
    to the 'routeflux' logger hierarchy.
    """
    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components(),
    )
    logger.info(f"Logging configured (Profile: {app_config.profile or 'default'})")
