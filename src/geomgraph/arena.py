"""Generation-checked slot arena.

Entities live in a flat list of slots.  A key records the slot index and
the slot's generation at insertion time; removing an entity bumps the
generation and pushes the slot on a free list.  A stale key therefore
fails its generation check instead of silently reaching whatever entity
later reuses the slot.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from .errors import StaleHandleError
from .models import Handle

K = TypeVar("K", bound=Handle)
T = TypeVar("T")


class _Slot(Generic[T]):
    __slots__ = ("generation", "value")

    def __init__(self) -> None:
        self.generation = 0
        self.value: Optional[T] = None


class Arena(Generic[K, T]):
    """Stable-key storage with O(1) insert, lookup and removal."""

    def __init__(self, key_type: Type[K]) -> None:
        self._key_type = key_type
        self._slots: List[_Slot[T]] = []
        self._free: List[int] = []
        self._len = 0

    @property
    def kind(self) -> str:
        return self._key_type.__name__

    def __len__(self) -> int:
        return self._len

    def __contains__(self, key: object) -> bool:
        return self._slot_for(key) is not None

    def insert_with_key(self, factory: Callable[[K], T]) -> K:
        """Allocate a key, store ``factory(key)`` under it and return the key."""
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
        else:
            index = len(self._slots)
            slot = _Slot()
            self._slots.append(slot)
        key = self._key_type(index, slot.generation)
        slot.value = factory(key)
        self._len += 1
        return key

    def get(self, key: K) -> T:
        slot = self._slot_for(key)
        if slot is None:
            raise StaleHandleError(key, self.kind)
        return slot.value

    def remove(self, key: K) -> T:
        slot = self._slot_for(key)
        if slot is None:
            raise StaleHandleError(key, self.kind)
        value = slot.value
        slot.value = None
        slot.generation += 1
        self._free.append(key.index)
        self._len -= 1
        return value

    def keys(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[T]:
        for _, value in self.items():
            yield value

    def items(self) -> Iterator[Tuple[K, T]]:
        for index, slot in enumerate(self._slots):
            if slot.value is not None:
                yield self._key_type(index, slot.generation), slot.value

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def _slot_for(self, key: object) -> Optional[_Slot[T]]:
        if type(key) is not self._key_type:
            return None
        if not 0 <= key.index < len(self._slots):
            return None
        slot = self._slots[key.index]
        if slot.generation != key.generation or slot.value is None:
            return None
        return slot
