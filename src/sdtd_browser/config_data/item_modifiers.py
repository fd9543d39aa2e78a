"""
Item modifiers (weapon/tool mods and cosmetics) from item_modifiers.xml.
"""

from typing import List, Optional

from .models import RawNode
from .xml_object import PropertyObject, XmlObject
from .xml_service import XmlService


class PassiveEffect(XmlObject):
    """A <passive_effect name=... operation=... value=... tier=...> element."""

    @property
    def operation(self) -> Optional[str]:
        return self.attribute("operation")

    def value_at(self, tier: float) -> float:
        """Effect value for a quality tier.

        Effects without a tier range have a constant value.

        Raises:
            MalformedDataError: if the value or tier range is malformed
        """
        tiers = self.attribute("tier")
        if tiers is None:
            return self.parse_number(self.attribute("value"))
        return self.interpolate_strings(self.attribute("value"), tiers, tier)


def _split_tags(value: Optional[str]) -> List[str]:
    return [tag.strip() for tag in value.split(",") if tag.strip()] if value else []


class ItemModifier(PropertyObject):
    """One <item_modifier> element."""

    @property
    def modifier_type(self) -> Optional[str]:
        """Modifier kind: attachment or mod."""
        return self.attribute("type")

    @property
    def installable_tags(self) -> List[str]:
        return _split_tags(self.attribute("installable_tags"))

    @property
    def modifier_tags(self) -> List[str]:
        return _split_tags(self.attribute("modifier_tags"))

    @property
    def blocked_tags(self) -> List[str]:
        return _split_tags(self.attribute("blocked_tags"))

    @property
    def passive_effects(self) -> List[PassiveEffect]:
        effects: List[PassiveEffect] = []
        for group in self.children("effect_group"):
            effects.extend(PassiveEffect(child.xml_element) for child in group.children("passive_effect"))
        return effects

    def passive_effect_value(self, name: str, tier: float) -> Optional[float]:
        """Value of the first passive effect with this name at a tier, if any."""
        for effect in self.passive_effects:
            if effect.name == name:
                return effect.value_at(tier)
        return None


class ItemModifiersService(XmlService[ItemModifier]):
    """Collection of every item modifier of item_modifiers.xml."""

    kind = "item modifier"

    def new_element(self, xml_element: RawNode) -> ItemModifier:
        return ItemModifier(xml_element)
