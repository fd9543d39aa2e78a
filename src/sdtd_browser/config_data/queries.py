"""
Browser queries: search, weapon listing and column sorting.

These helpers back the search box and the sortable tables; they only read
from the services and never change their caches.
"""

from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .items import Item, ItemsService
from .objects import SevenDaysObject

T = TypeVar("T")


def filter_objects(objects: Iterable[SevenDaysObject], query: Optional[str]) -> List[SevenDaysObject]:
    """Return the objects whose internal name contains the query (case-insensitive)."""
    filter_value = (query or "").strip().lower()
    if not filter_value:
        return list(objects)
    return [obj for obj in objects if filter_value in obj.name.lower()]


def weapon_items(items: ItemsService) -> List[Item]:
    """Items listed in the weapons creative group."""
    return items.get_all(lambda item: item.is_weapon)


def sort_entities(
    entities: Iterable[T],
    key: Callable[[T], Any],
    descending: bool = False,
) -> List[T]:
    """Stable sort by an accessor; entities without a value always come last.

    Args:
        entities: Entities to sort
        key: Accessor returning the sort value (or None)
        descending: Reverse the order of the valued entities
    """
    valued = []
    missing = []
    for entity in entities:
        (missing if key(entity) is None else valued).append(entity)
    valued.sort(key=key, reverse=descending)
    return valued + missing
