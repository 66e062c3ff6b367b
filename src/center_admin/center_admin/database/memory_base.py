from __future__ import annotations

import threading
from typing import Callable, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T")


class LockedCollection(Generic[T]):
    """Ordered, id-keyed in-process collection.

    Every mutation holds the collection lock; reads copy under the same lock,
    so a reader sees either the state before a write or after it. Overwriting
    an existing key keeps its original position.
    """

    def __init__(self, key: Callable[[T], Hashable]):
        self._key = key
        self._items: dict[Hashable, T] = {}
        self._lock = threading.Lock()

    def put(self, item: T) -> T:
        with self._lock:
            self._items[self._key(item)] = item
        return item

    def add(self, item: T) -> T:
        key = self._key(item)
        with self._lock:
            if key in self._items:
                raise KeyError(key)
            self._items[key] = item
        return item

    def add_built(self, build: Callable[[List[T]], T]) -> T:
        """Build an item from the current contents and add it, under one lock hold.

        ``build`` sees the items present at that moment, so a key it derives
        from them cannot be taken by a concurrent writer before the insert.
        """

        with self._lock:
            item = build(list(self._items.values()))
            key = self._key(item)
            if key in self._items:
                raise KeyError(key)
            self._items[key] = item
        return item

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            return self._items.get(key)

    def remove(self, key: Hashable) -> bool:
        with self._lock:
            return self._items.pop(key, None) is not None

    def snapshot(self) -> List[T]:
        with self._lock:
            return list(self._items.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
