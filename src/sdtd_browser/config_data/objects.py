"""
Composite objects: everything the configuration knows about one name.

An item, its recipe, a block and an item modifier may all share the same
name; ObjectService merges them into one SevenDaysObject.
"""

import logging
from typing import Iterator, List, Optional

from .blocks import Block, BlocksService
from .caches import XmlObjectsCache
from .item_modifiers import ItemModifier, ItemModifiersService
from .items import Item, ItemsService
from .recipes import Recipe, RecipesService


class SevenDaysObject:
    """Aggregate of the entities sharing one name. Fields are views, never copies."""

    def __init__(self, name: str):
        self.name = name
        self.item: Optional[Item] = None
        self.recipe: Optional[Recipe] = None
        self.block: Optional[Block] = None
        self.item_modifier: Optional[ItemModifier] = None

    def __repr__(self) -> str:
        parts = [
            field
            for field in ("item", "recipe", "block", "item_modifier")
            if getattr(self, field) is not None
        ]
        return f"SevenDaysObject(name={self.name!r}, parts={parts})"

    @property
    def icon(self) -> Optional[str]:
        """Custom icon of the item, else of the block, else of the modifier."""
        for source in (self.item, self.block, self.item_modifier):
            if source is not None and source.custom_icon:
                return source.custom_icon
        return None

    @property
    def icon_tint(self) -> Optional[str]:
        for source in (self.item, self.block, self.item_modifier):
            if source is not None and source.custom_icon_tint:
                return source.custom_icon_tint
        return None


class Builder:
    """Collects the parts of one SevenDaysObject.

    The object is only created once a part is found, so ``build`` returns
    None for names unknown to every collection.
    """

    def __init__(self, name: str):
        self.name = name
        self._built_object: Optional[SevenDaysObject] = None

    @property
    def object(self) -> SevenDaysObject:
        if self._built_object is None:
            self._built_object = SevenDaysObject(self.name)
        return self._built_object

    def item(self, items: ItemsService) -> "Builder":
        item = items.get(self.name)
        if item is not None:
            self.object.item = item
        return self

    def recipe(self, recipes: RecipesService) -> "Builder":
        recipe = recipes.get(self.name)
        if recipe is not None:
            self.object.recipe = recipe
        return self

    def block(self, blocks: BlocksService) -> "Builder":
        block = blocks.get(self.name)
        if block is not None:
            self.object.block = block
        return self

    def item_modifier(self, item_modifiers: ItemModifiersService) -> "Builder":
        item_modifier = item_modifiers.get(self.name)
        if item_modifier is not None:
            self.object.item_modifier = item_modifier
        return self

    def build(self) -> Optional[SevenDaysObject]:
        """Return the object only if some collection defines the name."""
        return self._built_object


class ObjectService:
    """Cross-collection lookup by name, cached for the process lifetime."""

    def __init__(
        self,
        items: ItemsService,
        recipes: RecipesService,
        blocks: BlocksService,
        item_modifiers: ItemModifiersService,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.items = items
        self.recipes = recipes
        self.blocks = blocks
        self.item_modifiers = item_modifiers
        self.cache: XmlObjectsCache[SevenDaysObject] = XmlObjectsCache()

    def _build(self, name: str) -> Optional[SevenDaysObject]:
        return (
            Builder(name)
            .item(self.items)
            .recipe(self.recipes)
            .block(self.blocks)
            .item_modifier(self.item_modifiers)
            .build()
        )

    def get(self, name: str) -> Optional[SevenDaysObject]:
        """Return the object for name, or None if no collection knows it."""
        return self.cache.get_or_put(name, lambda: self._build(name))

    def names(self) -> List[str]:
        """Ordered union of the names of every collection, each name once.

        Collections are visited in a fixed order: items, recipes, blocks,
        item modifiers.
        """
        seen: dict[str, None] = {}
        for service in (self.items, self.recipes, self.blocks, self.item_modifiers):
            for element in service.get_all():
                if element.name and element.name not in seen:
                    seen[element.name] = None
        return list(seen)

    def _create_all(self) -> Iterator[SevenDaysObject]:
        names = self.names()
        self.logger.info(f"Building {len(names)} objects")
        for name in names:
            obj = self.get(name)
            if obj is not None:
                yield obj

    def get_all(self) -> List[SevenDaysObject]:
        """Return one object per known name; computed once, then cached."""
        return self.cache.get_or_put_all(lambda obj: obj.name, self._create_all)
