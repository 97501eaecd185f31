"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/config.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Manages application configuration using QSettings. Standardizes
                paths for configuration and data across different platforms
                (XDG standards on Linux) and locates the content directory.
------------------------------------------------------------------------------
"""

import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple

from PyQt6.QtCore import QSettings, QStandardPaths


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via class methods or single instance.
    """

    KEY_CONTENT_DIR: str = "content_dir"
    KEY_EXTENSIONS: str = "extensions"
    KEY_DEFAULT_THEME: str = "default_theme"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"

    ENV_CONTENT_DIR: str = "WIKIFLUX_CONTENT_DIR"

    # Defaults
    DEFAULT_EXTENSIONS: Tuple[str, ...] = (".mdx", ".md")
    DEFAULT_THEME: str = "dark"
    ALLOWED_DEFAULT_THEMES: Tuple[str, ...] = ("dark", "auto")

    APP_ID: str = "wikiflux"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings will be isolated (e.g. wikiflux-dev).
        """
        # If no profile provided, use the last active one (Global Singleton-like)
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_config_dir(self) -> Path:
        """
        Returns the path to the application configuration directory.
        Forces a flat structure: ~/.config/wikiflux[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
        config_dir = Path(base_path) / self.active_id
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/wikiflux[-profile]/
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

    def get_content_dir(self) -> Path:
        """
        Retrieves the directory holding the content files.
        The environment variable takes precedence over the stored setting.

        Returns:
            The content directory path.
        """
        env_dir = os.environ.get(self.ENV_CONTENT_DIR, "").strip()
        if env_dir:
            return Path(env_dir)

        val = str(self._get_setting("Content", self.KEY_CONTENT_DIR, "") or "")
        if not val:
            return Path.cwd() / "content"
        return Path(val)

    def set_content_dir(self, path: str) -> None:
        """
        Saves the content directory.

        Args:
            path: The content directory path string.
        """
        self._set_setting("Content", self.KEY_CONTENT_DIR, str(path))

    def get_content_extensions(self) -> Tuple[str, ...]:
        """
        Retrieves the recognized content file extensions, in lookup order.

        Returns:
            A tuple of extensions including the leading dot.
        """
        raw = self._get_setting("Content", self.KEY_EXTENSIONS, "")
        if isinstance(raw, (list, tuple)):
            items = [str(x) for x in raw]
        else:
            items = [x for x in str(raw or "").split(",")]

        extensions = []
        for item in items:
            ext = item.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = "." + ext
            if ext not in extensions:
                extensions.append(ext)
        return tuple(extensions) or self.DEFAULT_EXTENSIONS

    def set_content_extensions(self, extensions: Tuple[str, ...]) -> None:
        """Saves the recognized content file extensions."""
        self._set_setting("Content", self.KEY_EXTENSIONS, ",".join(extensions))

    def get_default_theme(self) -> str:
        """
        Retrieves the theme used when no preference has been stored yet.

        Returns:
            'dark' or 'auto'.
        """
        val = str(self._get_setting("Display", self.KEY_DEFAULT_THEME, self.DEFAULT_THEME)).lower()
        return val if val in self.ALLOWED_DEFAULT_THEMES else self.DEFAULT_THEME

    def set_default_theme(self, theme: str) -> None:
        """
        Saves the default theme.

        Raises:
            ValueError: If the theme is neither 'dark' nor 'auto'.
        """
        theme = theme.strip().lower()
        if theme not in self.ALLOWED_DEFAULT_THEMES:
            raise ValueError(f"Unsupported default theme: {theme}")
        self._set_setting("Display", self.KEY_DEFAULT_THEME, theme)

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, "WARNING"))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> dict:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return parsed if isinstance(parsed, dict) else {}

    def set_log_components(self, components: dict) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "app.log"
