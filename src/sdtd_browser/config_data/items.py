"""
Items from items.xml: weapons, tools, ammo, resources...
"""

from typing import List, Optional

from .models import PROPERTY_TAG, VALUE_ATTRIBUTE, WEAPONS_GROUP, RawNode
from .xml_object import PropertyObject, XmlObject
from .xml_service import XmlService


class Item(PropertyObject):
    """One <item> element."""

    @property
    def groups(self) -> List[str]:
        """Creative menu groups, e.g. ["Ammo/Weapons", "Ranged Weapons"]."""
        return self.get_property_list("Group")

    @property
    def tags(self) -> List[str]:
        return self.get_property_list("Tags")

    @property
    def is_weapon(self) -> bool:
        return WEAPONS_GROUP in self.groups

    def action(self, index: int = 0) -> Optional[XmlObject]:
        """Return the <property class="ActionN"> block of the item."""
        return self.first_child_by_class(PROPERTY_TAG, f"Action{index}")

    def action_property(self, name: str, index: int = 0) -> Optional[str]:
        action = self.action(index)
        if not action:
            return None
        prop = action.first_child_by_name(PROPERTY_TAG, name)
        return prop.attribute(VALUE_ATTRIBUTE) if prop else None

    @property
    def damage_falloff_range(self) -> Optional[str]:
        return self.action_property("DamageFalloffRange")

    @property
    def max_range(self) -> Optional[str]:
        return self.action_property("MaxRange")

    @property
    def delay(self) -> Optional[float]:
        """Seconds between two shots of the primary action."""
        value = self.action_property("Delay")
        return self.parse_number(value) if value is not None else None

    @property
    def rounds_per_minute(self) -> Optional[float]:
        delay = self.delay
        if not delay:
            return None
        return 60 / delay


class ItemsService(XmlService[Item]):
    """Collection of every item of items.xml."""

    kind = "item"

    def new_element(self, xml_element: RawNode) -> Item:
        return Item(xml_element)
