"""
Data models for 7 Days to Die configuration data.

Contains type definitions, constants and the error type shared by the
config_data package. Raw nodes keep the dict-based xml2js shape produced by
the external converter: attributes live under the ``$`` key, every other key
maps a child tag to a list of child nodes.
"""

from typing import Any, Dict, List, TypeAlias

# Type aliases for clarity
RawNode: TypeAlias = Dict[str, Any]
"""A single raw hierarchical node (e.g. one <item> element) as a dict."""

RawNodeList: TypeAlias = List[RawNode]
"""The repeated entity elements of one document."""

# Key holding the attribute mapping of a raw node
ATTRIBUTES_KEY = "$"

# Common attribute and tag names
NAME_ATTRIBUTE = "name"
CLASS_ATTRIBUTE = "class"
VALUE_ATTRIBUTE = "value"
PROPERTY_TAG = "property"

# Item group marking weapons
WEAPONS_GROUP = "Ammo/Weapons"


class MalformedDataError(ValueError):
    """Raised when numeric data in a configuration document cannot be used."""
    pass
