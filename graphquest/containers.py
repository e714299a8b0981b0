"""Generic containers: a max-priority heap, an ordered map and a set."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

Compare = Callable[[Any, Any], bool]


@dataclass
class _HeapEntry(Generic[T]):
    data: T
    priority: int


class MaxHeap(Generic[T]):
    """Priority queue that always exposes the element of highest priority."""

    def __init__(self) -> None:
        self._entries: list[_HeapEntry[T]] = []

    def push(self, data: T, priority: int) -> None:
        """Add ``data`` with the given priority."""
        entries = self._entries
        entries.append(_HeapEntry(data, priority))
        now = len(entries) - 1
        while now > 0 and entries[(now - 1) // 2].priority < priority:
            entries[now] = entries[(now - 1) // 2]
            now = (now - 1) // 2
        entries[now] = _HeapEntry(data, priority)

    def top(self) -> T | None:
        """Return the data of highest priority, or None when empty."""
        return self._entries[0].data if self._entries else None

    def pop(self) -> T:
        """Remove and return the data of highest priority."""
        entries = self._entries
        if not entries:
            raise IndexError("pop from an empty heap")
        removed = entries[0].data
        last = entries.pop()
        if not entries:
            return removed

        entries[0] = last
        priority = last.priority
        size = len(entries)
        now = 1
        while (now < size and entries[now].priority > priority) or (
            now + 1 < size and entries[now + 1].priority > priority
        ):
            parent = (now - 1) // 2
            if now + 1 < size and entries[now].priority < entries[now + 1].priority:
                now += 1
            entries[parent], entries[now] = entries[now], entries[parent]
            now = now * 2 + 1
        return removed

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class MapPair(Generic[K, V]):
    """A key and the value stored with it."""

    key: K
    value: V


class Map(Generic[K, V]):
    """Associative list keyed by a user-supplied comparison.

    With ``lower_than`` the pairs are kept in ascending key order and two keys
    are equal when neither is lower than the other. With only ``is_equal`` the
    pairs keep insertion order. With neither, keys are compared with ``==``.
    """

    def __init__(
        self,
        is_equal: Compare | None = None,
        lower_than: Compare | None = None,
    ) -> None:
        if is_equal is None and lower_than is None:
            is_equal = operator.eq
        self._is_equal = is_equal
        self._lower_than = lower_than
        self._pairs: list[MapPair[K, V]] = []

    def _matches(self, pair_key: K, key: K) -> bool:
        if self._is_equal is not None and self._is_equal(pair_key, key):
            return True
        lt = self._lower_than
        return lt is not None and not lt(pair_key, key) and not lt(key, pair_key)

    def _position(self, key: K) -> int | None:
        return next(
            (pos for pos, pair in enumerate(self._pairs) if self._matches(pair.key, key)),
            None,
        )

    def insert(self, key: K, value: V) -> bool:
        """Store the pair unless the key is present; report whether it was added."""
        if self._position(key) is not None:
            return False
        self.insert_multi(key, value)
        return True

    def insert_multi(self, key: K, value: V) -> None:
        """Store the pair even if the key is already present."""
        pair = MapPair(key, value)
        lt = self._lower_than
        if lt is None:
            self._pairs.append(pair)
            return
        spot = next(
            (pos for pos, other in enumerate(self._pairs) if lt(key, other.key)),
            len(self._pairs),
        )
        self._pairs.insert(spot, pair)

    def remove(self, key: K) -> MapPair[K, V]:
        """Remove and return the first pair with ``key``."""
        pos = self._position(key)
        if pos is None:
            raise KeyError(key)
        return self._pairs.pop(pos)

    def search(self, key: K) -> MapPair[K, V] | None:
        """Return the first pair with ``key``, or None."""
        pos = self._position(key)
        return None if pos is None else self._pairs[pos]

    def clear(self) -> None:
        """Remove every pair."""
        self._pairs.clear()

    def __iter__(self) -> Iterator[MapPair[K, V]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)


class Set(Generic[T]):
    """Collection of distinct values under a user-supplied comparison."""

    def __init__(
        self,
        is_equal: Compare | None = None,
        lower_than: Compare | None = None,
    ) -> None:
        self._map: Map[T, T] = Map(is_equal, lower_than)

    def add(self, value: T) -> bool:
        """Add ``value`` unless an equal one is present; report whether it was added."""
        return self._map.insert(value, value)

    def remove(self, value: T) -> T:
        """Remove and return the stored value equal to ``value``."""
        return self._map.remove(value).value

    def search(self, value: T) -> T | None:
        """Return the stored value equal to ``value``, or None."""
        pair = self._map.search(value)
        return None if pair is None else pair.value

    def clear(self) -> None:
        """Remove every value."""
        self._map.clear()

    def __contains__(self, value: object) -> bool:
        return self._map.search(value) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return (pair.value for pair in self._map)

    def __len__(self) -> int:
        return len(self._map)