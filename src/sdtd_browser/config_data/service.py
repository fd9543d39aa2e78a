"""
Main service for 7 Days to Die configuration data.

Loads every document once at construction and wires the entity collections
and the cross-collection ObjectService. One instance is created at startup
and handed to the consumers that need it.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Tuple, TYPE_CHECKING

from .blocks import BlocksService
from .item_modifiers import ItemModifiersService
from .items import ItemsService
from .loaders import ConfigFileLoader
from .models import RawNodeList
from .objects import ObjectService
from .recipes import RecipesService

if TYPE_CHECKING:
    from ..settings import AppSettings

# Collection key -> (document file name, path to the element list)
DOCUMENTS: Dict[str, Tuple[str, Tuple[str, str]]] = {
    "items": ("items.xml.json", ("items", "item")),
    "recipes": ("recipes.xml.json", ("recipes", "recipe")),
    "blocks": ("blocks.xml.json", ("blocks", "block")),
    "item_modifiers": ("item_modifiers.xml.json", ("item_modifiers", "item_modifier")),
}


class ConfigDataService:
    """Entry point to the configuration data of one game install."""

    def __init__(self, config_path: str | Path):
        """Load the documents and build the collections.

        Args:
            config_path: The game's Data/Config folder holding the ``*.xml.json`` documents
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.config_path = Path(config_path)
        self.loader = ConfigFileLoader()

        self.logger.info(f"Initializing ConfigDataService with path: {self.config_path}")
        elements = self._load_documents()

        self.items = ItemsService(elements["items"])
        self.recipes = RecipesService(elements["recipes"])
        self.blocks = BlocksService(elements["blocks"])
        self.item_modifiers = ItemModifiersService(elements["item_modifiers"])
        self.objects = ObjectService(self.items, self.recipes, self.blocks, self.item_modifiers)

        self.logger.info(
            f"Config data loaded: {len(self.items)} items, {len(self.recipes)} recipes, "
            f"{len(self.blocks)} blocks, {len(self.item_modifiers)} item modifiers"
        )

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "ConfigDataService":
        """Create the service from the configured path.

        Raises:
            ConfigError: if no config path is configured
        """
        return cls(settings.require_config_path())

    def _load_documents(self) -> Dict[str, RawNodeList]:
        """Read every document in parallel."""
        elements: Dict[str, RawNodeList] = {key: [] for key in DOCUMENTS}

        missing = [
            file_name
            for file_name, _ in DOCUMENTS.values()
            if not (self.config_path / file_name).exists()
        ]
        for file_name in missing:
            self.logger.warning(f"Config document not found: {self.config_path / file_name}")

        with ThreadPoolExecutor(max_workers=len(DOCUMENTS)) as executor:
            future_to_key = {
                executor.submit(
                    self.loader.read_elements, self.config_path / file_name, element_path
                ): key
                for key, (file_name, element_path) in DOCUMENTS.items()
                if file_name not in missing
            }
            for future in as_completed(future_to_key):
                elements[future_to_key[future]] = future.result()

        return elements
