"""
Blocks from blocks.xml.
"""

from typing import Optional

from .models import RawNode
from .xml_object import PropertyObject
from .xml_service import XmlService


class Block(PropertyObject):
    """One <block> element."""

    @property
    def material(self) -> Optional[str]:
        return self.get_property("Material")

    @property
    def shape(self) -> Optional[str]:
        return self.get_property("Shape")


class BlocksService(XmlService[Block]):
    """Collection of every block of blocks.xml."""

    kind = "block"

    def new_element(self, xml_element: RawNode) -> Block:
        return Block(xml_element)
