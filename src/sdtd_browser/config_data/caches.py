"""
Memoizing caches used by the configuration data services.

Both caches follow a write-once contract: a value computed for a key is
stored forever, including "no value" (None), so the producer never runs twice
for the same key.
"""

import logging
import threading
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class XmlObjectsCache(Generic[T]):
    """Single-key cache with "all items materialized" tracking.

    Keys keep their insertion order. ``get_or_put_all`` remembers the order in
    which its producer yielded items and always answers in that order.
    """

    def __init__(self):
        self._values: Dict[str, Optional[T]] = {}
        # Keys produced by the "all" producer, in production order
        self._all_keys: List[str] = []
        self.has_all = False
        self._lock = threading.RLock()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def __len__(self) -> int:
        return len(self._values)

    def keys(self) -> List[str]:
        """Return stored keys in insertion order."""
        return list(self._values)

    def has(self, key: str) -> bool:
        """Check whether a value (possibly None) was stored for the key."""
        return key in self._values

    def get(self, key: str) -> Optional[T]:
        """Return the stored value, or None if nothing was stored."""
        return self._values.get(key)

    def put(self, key: str, item: Optional[T]) -> None:
        """Store a value, keeping the key's original position if it exists."""
        with self._lock:
            self._values[key] = item

    def get_or_put(self, key: str, create_item: Callable[[], Optional[T]]) -> Optional[T]:
        """Return the value for key, computing and storing it on first access."""
        with self._lock:
            if key not in self._values:
                self.logger.debug(f"Cache miss, creating element at key {key}")
                self._values[key] = create_item()
            return self._values[key]

    def get_or_put_all(
        self,
        get_key: Callable[[T], str],
        create_all_items: Callable[[], Iterable[T]],
    ) -> List[T]:
        """Return every item, running the producer once on first call.

        Items are stored under ``get_key(item)``; for duplicate keys the last
        one wins. The result follows the producer's first-seen order and does
        not depend on which keys ``get_or_put`` stored beforehand.
        """
        with self._lock:
            if not self.has_all:
                self.logger.debug("Cache miss, creating all elements")
                all_keys: List[str] = []
                seen: set[str] = set()
                for item in create_all_items():
                    key = get_key(item)
                    self._values[key] = item
                    if key not in seen:
                        seen.add(key)
                        all_keys.append(key)
                self._all_keys = all_keys
                self.has_all = True
            return [self._values[key] for key in self._all_keys]  # type: ignore[misc]


class XmlObjectsCache2(Generic[T]):
    """Two-key cache for parent-scoped child lookups (tag, then name)."""

    def __init__(self):
        self._values: Dict[str, Dict[str, Optional[T]]] = {}
        self._lock = threading.RLock()

    def _auto_create(self, key1: str) -> Dict[str, Optional[T]]:
        """Return the nested mapping for key1, creating it on first encounter."""
        nested = self._values.get(key1)
        if nested is None:
            nested = self._values[key1] = {}
        return nested

    def has(self, key1: str, key2: str) -> bool:
        with self._lock:
            return key2 in self._auto_create(key1)

    def get(self, key1: str, key2: str) -> Optional[T]:
        with self._lock:
            return self._auto_create(key1).get(key2)

    def get_or_put(
        self, key1: str, key2: str, create_item: Callable[[], Optional[T]]
    ) -> Optional[T]:
        """Return the value for (key1, key2), computing it on first access."""
        with self._lock:
            nested = self._auto_create(key1)
            if key2 not in nested:
                nested[key2] = create_item()
            return nested[key2]
