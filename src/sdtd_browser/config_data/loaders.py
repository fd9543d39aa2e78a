"""
File loaders for 7 Days to Die configuration documents.

Documents are the ``*.xml.json`` files produced from the game's Config XML
files by an xml2js style converter. Parsing uses orjson.
"""

import logging
from pathlib import Path
from typing import Any, Sequence

import orjson

from .models import RawNodeList


class ConfigFileLoader:
    """Loads the repeated entity elements of configuration documents."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("ConfigFileLoader initialized")

    @staticmethod
    def extract_elements(data: Any, element_path: Sequence[str]) -> RawNodeList:
        """Walk element_path (e.g. ("items", "item")) down a parsed document.

        A single element stored as an object instead of a list is wrapped.
        Returns an empty list when the path does not exist.
        """
        node = data
        for key in element_path:
            if not isinstance(node, dict) or key not in node:
                return []
            node = node[key]
        if isinstance(node, dict):
            return [node]
        if isinstance(node, list):
            return [element for element in node if isinstance(element, dict)]
        return []

    def read_elements(self, json_file: Path, element_path: Sequence[str]) -> RawNodeList:
        """Read a document and return its entity elements.

        Read and parse errors are logged and produce an empty list so that a
        single broken document does not stop the whole loading process.

        Args:
            json_file: Path to the ``*.xml.json`` document
            element_path: Keys leading to the element list, e.g. ("recipes", "recipe")

        Returns:
            List of raw elements
        """
        try:
            with json_file.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.error(f"Error reading config file {json_file}: {e}")
            return []

        elements = self.extract_elements(data, element_path)
        if not elements:
            self.logger.warning(
                f"No elements found at {'/'.join(element_path)} in {json_file}"
            )
        else:
            self.logger.debug(f"Read {len(elements)} elements from {json_file.name}")
        return elements
