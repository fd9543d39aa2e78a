"""
Crafting recipes from recipes.xml.
"""

from typing import List, Optional

from .models import RawNode
from .xml_object import XmlObject
from .xml_service import XmlService


def _parse_count(obj: XmlObject, default: int = 1) -> int | float:
    value = obj.attribute("count")
    if value is None:
        return default
    number = obj.parse_number(value)
    return int(number) if number.is_integer() else number


class Ingredient(XmlObject):
    """One <ingredient name=... count=...> of a recipe."""

    @property
    def count(self) -> int | float:
        """Needed amount.

        Raises:
            MalformedDataError: if the count is not numeric
        """
        return _parse_count(self)


class Recipe(XmlObject):
    """One <recipe> element."""

    @property
    def count(self) -> int | float:
        """Amount produced by one craft."""
        return _parse_count(self)

    @property
    def craft_area(self) -> Optional[str]:
        return self.attribute("craft_area")

    @property
    def craft_tool(self) -> Optional[str]:
        return self.attribute("craft_tool")

    @property
    def tags(self) -> List[str]:
        value = self.attribute("tags")
        return [tag.strip() for tag in value.split(",") if tag.strip()] if value else []

    @property
    def ingredients(self) -> List[Ingredient]:
        return [Ingredient(child.xml_element) for child in self.children("ingredient")]


class RecipesService(XmlService[Recipe]):
    """Collection of every recipe of recipes.xml."""

    kind = "recipe"

    def new_element(self, xml_element: RawNode) -> Recipe:
        return Recipe(xml_element)

    def handle_duplicates(self, elements: List[Recipe]) -> Recipe:
        """Prefer the first recipe craftable without a workstation."""
        for recipe in elements:
            if not recipe.craft_area:
                return recipe
        return elements[0]
