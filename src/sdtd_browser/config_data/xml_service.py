"""
Generic typed collection over the repeated elements of one document.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from .caches import XmlObjectsCache
from .models import ATTRIBUTES_KEY, NAME_ATTRIBUTE, RawNode, RawNodeList
from .xml_object import XmlObject

T = TypeVar("T", bound=XmlObject)


def _node_name(xml_element: RawNode) -> Optional[str]:
    attributes = xml_element.get(ATTRIBUTES_KEY) if isinstance(xml_element, dict) else None
    return attributes.get(NAME_ATTRIBUTE) if attributes else None


class XmlService(ABC, Generic[T]):
    """Base class for entity collections (items, recipes, blocks...).

    Typed entities are built on demand from the raw elements, deduplicated by
    name and cached: ``get`` fills the cache one name at a time, ``get_all``
    materializes every element once.

    Subclasses provide ``new_element`` and may override ``handle_duplicates``.
    """

    # Entity kind used in diagnostics, e.g. "item"
    kind = "element"

    def __init__(self, xml_elements: RawNodeList):
        """Initialize the collection.

        Args:
            xml_elements: Raw entity elements, e.g. items_file["items"]["item"]
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.cache: XmlObjectsCache[T] = XmlObjectsCache()

        self.xml_elements: RawNodeList = []
        for xml_element in xml_elements:
            if not _node_name(xml_element):
                self.logger.warning(f"Skipping {self.kind} without a name: {xml_element!r:.120}")
                continue
            self.xml_elements.append(xml_element)

        self.logger.debug(f"{self.__class__.__name__} initialized with {len(self.xml_elements)} elements")

    def __len__(self) -> int:
        return len(self.xml_elements)

    @abstractmethod
    def new_element(self, xml_element: RawNode) -> T:
        """Wrap one raw element into its typed entity. Must be side-effect free."""

    def handle_duplicates(self, elements: List[T]) -> T:
        """Choose the element representing a name shared by several elements.

        Args:
            elements: At least two elements sharing the same name, in document order

        Returns:
            The element to keep (default: the first one)
        """
        return elements[0]

    def _resolve(self, name: str, elements: List[T]) -> Optional[T]:
        if len(elements) <= 1:
            return elements[0] if elements else None
        self.logger.warning(f"Duplicate {self.kind} '{name}' found {len(elements)} times")
        return self.handle_duplicates(elements)

    def get(self, name: str) -> Optional[T]:
        """Return the entity with this name, or None if not found.

        Args:
            name: Entity name, e.g. "gunPistol"
        """
        return self.cache.get_or_put(
            name,
            lambda: self._resolve(
                name,
                [
                    self.new_element(xml_element)
                    for xml_element in self.xml_elements
                    if _node_name(xml_element) == name
                ],
            ),
        )

    def _create_all(self) -> Iterator[T]:
        elements_by_name: Dict[str, RawNodeList] = {}
        for xml_element in self.xml_elements:
            elements_by_name.setdefault(_node_name(xml_element), []).append(xml_element)  # type: ignore[arg-type]

        for name, xml_elements in elements_by_name.items():
            # Keep entities already handed out by get() so identity stays stable
            cached = self.cache.get(name)
            if cached is not None:
                yield cached
                continue
            element = self._resolve(name, [self.new_element(xml_element) for xml_element in xml_elements])
            if element is not None:
                yield element

    def get_all(self, filter: Optional[Callable[[T], bool]] = None) -> List[T]:
        """Return all entities deduplicated by name, in document order.

        Args:
            filter: Optional predicate applied after deduplication
        """
        elements = self.cache.get_or_put_all(lambda element: element.name or "", self._create_all)
        if filter is None:
            return elements
        return [element for element in elements if filter(element)]
