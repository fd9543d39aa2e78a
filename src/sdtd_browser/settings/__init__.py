"""
Settings package for sdtd_browser.

Provides type-safe configuration management using Qt's QSettings for
cross-platform storage.

Usage:
    from sdtd_browser.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigError, ValidationResult
from .paths import PathSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigError",
    "ValidationResult",
    "PathSettings",
    "LoggingSettings",
]
