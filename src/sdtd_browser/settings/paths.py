"""
Path-related settings for sdtd_browser.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class PathSettings:
    """Manages path-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def config_path(self) -> Optional[Path]:
        """Get the folder holding the converted ``*.xml.json`` config documents."""
        path_str = self._get_str("paths/config", "")
        return Path(path_str) if path_str else None

    @config_path.setter
    def config_path(self, value: Optional[Path]) -> None:
        """Set the config documents folder."""
        self.settings.setValue("paths/config", str(value) if value else "")
        self.settings.sync()
