"""
Module for working with 7 Days to Die configuration data.

Provides typed, cached collections over the game's configuration documents
(items, recipes, blocks, item modifiers) and an ObjectService that merges
them into one object per name.
"""

from .service import ConfigDataService
from .models import (
    RawNode,
    RawNodeList,
    MalformedDataError,
    WEAPONS_GROUP,
)
from .caches import XmlObjectsCache, XmlObjectsCache2
from .xml_object import XmlObject, PropertyObject
from .xml_service import XmlService
from .items import Item, ItemsService
from .recipes import Recipe, Ingredient, RecipesService
from .blocks import Block, BlocksService
from .item_modifiers import ItemModifier, PassiveEffect, ItemModifiersService
from .objects import SevenDaysObject, Builder, ObjectService
from .loaders import ConfigFileLoader
from .queries import filter_objects, weapon_items, sort_entities

# Public exports
__all__ = [
    # Main service
    "ConfigDataService",
    # Type aliases
    "RawNode",
    "RawNodeList",
    # Errors and constants
    "MalformedDataError",
    "WEAPONS_GROUP",
    # Core building blocks
    "XmlObjectsCache",
    "XmlObjectsCache2",
    "XmlObject",
    "PropertyObject",
    "XmlService",
    # Entity kinds
    "Item",
    "ItemsService",
    "Recipe",
    "Ingredient",
    "RecipesService",
    "Block",
    "BlocksService",
    "ItemModifier",
    "PassiveEffect",
    "ItemModifiersService",
    # Composite objects
    "SevenDaysObject",
    "Builder",
    "ObjectService",
    # Loading and queries
    "ConfigFileLoader",
    "filter_objects",
    "weapon_items",
    "sort_entities",
]
