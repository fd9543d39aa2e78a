"""
sdtd_browser: browser for 7 Days to Die configuration data

Indexes items, recipes, blocks and item modifiers from the game's config
documents and merges them into one searchable object per name.
"""

__version__ = "0.1.0"
__author__ = "sdtd_browser Contributors"

# Core service imports
from .config_data import ConfigDataService, ObjectService, SevenDaysObject
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    "ConfigDataService",
    "ObjectService",
    # Data models
    "SevenDaysObject",
    # Logging
    "setup_logging",
]
