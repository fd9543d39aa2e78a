"""
Core settings management for sdtd_browser.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .types import ConfigError, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default", settings_file: Optional[str | Path] = None):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Explicit INI file to use instead of the platform store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("sdtd_browser", "sdtd_browser")
        self.profile = profile

        # Use profile as a group: sdtd_browser/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()

    def validate(self, config_path: Optional[Path] = None) -> ValidationResult:
        """Validate current configuration, optionally against another config folder."""
        return self._validator.validate(config_path)

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def config_path(self) -> Optional[Path]:
        """Get the config documents folder."""
        return self._paths.config_path

    @config_path.setter
    def config_path(self, value: Optional[Path]) -> None:
        self._paths.config_path = value

    def require_config_path(self) -> Path:
        """Return the config documents folder.

        Raises:
            ConfigError: if the path is not set
        """
        config_path = self.config_path
        if not config_path:
            raise ConfigError(f"Config path not set in profile '{self.profile}'")
        return config_path

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        return self._logging.log_file_path
