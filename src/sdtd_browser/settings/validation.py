"""
Settings validation system for sdtd_browser.
"""

import logging
from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)

# Documents the browser reads from the config folder
REQUIRED_DOCUMENTS = [
    "items.xml.json",
    "recipes.xml.json",
    "blocks.xml.json",
    "item_modifiers.xml.json",
]


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self, config_path: Optional[Path] = None) -> ValidationResult:
        """Validate current configuration.

        Args:
            config_path: Folder to check instead of the stored one (not saved)
        """
        errors: List[str] = []
        warnings: List[str] = []

        if config_path is None:
            config_path = self.settings.config_path
        if config_path:
            if not config_path.exists():
                errors.append(f"Config path does not exist: {config_path}")
            elif not config_path.is_dir():
                errors.append(f"Config path is not a directory: {config_path}")
            else:
                for document in REQUIRED_DOCUMENTS:
                    if not (config_path / document).exists():
                        warnings.append(f"Config document missing: {config_path / document}")
        else:
            errors.append("Config path not set")

        logger.debug(f"Validation finished: {len(errors)} errors, {len(warnings)} warnings")
        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
