"""
Read-only view over one raw configuration node.
"""

from typing import Any, Dict, List, Optional, Sequence

from .caches import XmlObjectsCache2
from .models import (
    ATTRIBUTES_KEY,
    CLASS_ATTRIBUTE,
    NAME_ATTRIBUTE,
    PROPERTY_TAG,
    VALUE_ATTRIBUTE,
    MalformedDataError,
    RawNode,
)


class XmlObject:
    """Thin wrapper around a raw node exposing attributes and child lookups.

    First-child lookups are memoized per instance, so repeated queries for the
    same (tag, name) pair never rescan the children.
    """

    def __init__(self, xml_element: RawNode):
        self.xml_element = xml_element
        self._first_cache: XmlObjectsCache2["XmlObject"] = XmlObjectsCache2()
        self._first_with_class_cache: XmlObjectsCache2["XmlObject"] = XmlObjectsCache2()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    @property
    def attributes(self) -> Dict[str, str]:
        """Attribute mapping of the node (empty if it has none)."""
        return self.xml_element.get(ATTRIBUTES_KEY) or {}

    def attribute(self, key: str) -> Optional[str]:
        return self.attributes.get(key)

    @property
    def name(self) -> Optional[str]:
        return self.attribute(NAME_ATTRIBUTE)

    def children(self, xml_tag: str) -> List["XmlObject"]:
        """Wrap every element child listed under the tag, skipping text content."""
        return [
            XmlObject(child)
            for child in self.xml_element.get(xml_tag, [])
            if isinstance(child, dict)
        ]

    def _find_first(self, xml_tag: str, key: str, value: str) -> Optional["XmlObject"]:
        for child in self.xml_element.get(xml_tag, []):
            attributes = child.get(ATTRIBUTES_KEY) if isinstance(child, dict) else None
            if attributes and attributes.get(key) == value:
                return XmlObject(child)
        return None

    def first_child_by_name(self, xml_tag: str, name: str) -> Optional["XmlObject"]:
        """Return the first child under xml_tag whose name attribute matches."""
        return self._first_cache.get_or_put(
            xml_tag, name, lambda: self._find_first(xml_tag, NAME_ATTRIBUTE, name)
        )

    def first_child_by_class(self, xml_tag: str, class_name: str) -> Optional["XmlObject"]:
        """Return the first child under xml_tag whose class attribute matches."""
        return self._first_with_class_cache.get_or_put(
            xml_tag,
            class_name,
            lambda: self._find_first(xml_tag, CLASS_ATTRIBUTE, class_name),
        )

    @staticmethod
    def parse_number(value: Any) -> float:
        """Parse a numeric attribute value.

        Raises:
            MalformedDataError: if the value is missing or not numeric
        """
        try:
            return float(str(value).strip())
        except (TypeError, ValueError):
            raise MalformedDataError(f"Not a number: {value!r}") from None

    @staticmethod
    def parse_range(value: Optional[str]) -> tuple[float, float]:
        """Parse a "min,max" pair. A single number is both min and max."""
        if value is None:
            raise MalformedDataError("Missing range value")
        parts = [XmlObject.parse_number(part) for part in value.split(",")]
        if len(parts) == 1:
            return parts[0], parts[0]
        if len(parts) != 2:
            raise MalformedDataError(f"Expected 'min,max' range, got {value!r}")
        return parts[0], parts[1]

    @staticmethod
    def interpolate_strings(min_max_value: Optional[str], min_max_tier: Optional[str], tier: float) -> float:
        """Interpolate from "min,max" strings, e.g. ("10,20", "1,5", 3) -> 15."""
        return XmlObject.interpolate(
            XmlObject.parse_range(min_max_value),
            XmlObject.parse_range(min_max_tier),
            tier,
        )

    @staticmethod
    def interpolate(min_max_value: Sequence[float], min_max_tier: Sequence[float], tier: float) -> float:
        """Linearly interpolate a value for a tier.

        Tiers outside [min_tier, max_tier] extrapolate, no clamping is done.

        Raises:
            MalformedDataError: if min_tier == max_tier and tier is not that tier
        """
        min_value, max_value = min_max_value
        min_tier, max_tier = min_max_tier

        if tier == min_tier:
            return min_value
        if tier == max_tier:
            return max_value
        if min_tier == max_tier:
            raise MalformedDataError(
                f"Cannot interpolate tier {tier} over degenerate tier range {min_tier},{max_tier}"
            )
        return min_value + (tier - min_tier) / (max_tier - min_tier) * (max_value - min_value)


class PropertyObject(XmlObject):
    """Node whose values are stored in <property name=... value=...> children."""

    def get_property(self, name: str) -> Optional[str]:
        """Return the value of the first property child with the given name."""
        prop = self.first_child_by_name(PROPERTY_TAG, name)
        return prop.attribute(VALUE_ATTRIBUTE) if prop else None

    def get_property_list(self, name: str) -> List[str]:
        """Return a comma separated property value as a list of stripped strings."""
        value = self.get_property(name)
        if not value:
            return []
        return [part.strip() for part in value.split(",") if part.strip()]

    @property
    def extends(self) -> Optional[str]:
        return self.get_property("Extends")

    @property
    def custom_icon(self) -> Optional[str]:
        return self.get_property("CustomIcon")

    @property
    def custom_icon_tint(self) -> Optional[str]:
        return self.get_property("CustomIconTint")
