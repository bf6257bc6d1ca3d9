"""Immutable, insertion-ordered mapping used for environment frames and map
literals.

A Frame is backed by a pyrsistent PMap (lookup) and a PVector (key order), so
every operation returns a new Frame that shares structure with its receiver
and the receiver is never observably mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Callable, Optional

from pyrsistent import PMap, PVector, pmap, pvector

from doodle.errors import KeyValueCountMismatch

_log = logging.getLogger(__name__)


class Frame(Mapping):
    """Ordered key -> value mapping with copy-on-write helpers."""

    __slots__ = ("_index", "_order")

    def __init__(self, items: Optional[Mapping | Iterable[tuple[Hashable, Any]]] = None):
        # A plain dict keeps first-insertion order and the last value written,
        # which is the collapse rule for repeated keys.
        collected: dict[Hashable, Any] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                collected[key] = value
        self._index: PMap = pmap(collected)
        self._order: PVector = pvector(collected)

    @classmethod
    def _make(cls, index: PMap, order: PVector) -> Frame:
        frame = cls.__new__(cls)
        frame._index = index
        frame._order = order
        return frame

    @classmethod
    def build_from(cls, keys: Iterable[Hashable], values: Iterable[Any]) -> Frame:
        """Zip keys and values into a Frame.

        Raises KeyValueCountMismatch when the two sequences differ in length
        rather than returning a truncated frame.
        """
        keys, values = list(keys), list(values)
        if len(keys) != len(values):
            _log.debug("build_from: %d key(s) but %d value(s)", len(keys), len(values))
            raise KeyValueCountMismatch(len(keys), len(values), "in Frame.build_from")
        return cls(zip(keys, values))

    # --- Mapping protocol ---
    def __getitem__(self, key: Hashable) -> Any:
        return self._index[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"Frame({dict(self.items())!r})"

    # --- Persistent helpers ---
    def assoc(self, key: Hashable, value: Any) -> Frame:
        """Bind `key` to `value`. A key already present keeps its position."""
        order = self._order if key in self._index else self._order.append(key)
        return Frame._make(self._index.set(key, value), order)

    def merge(self, other: Mapping) -> Frame:
        """Right-biased union: keys in both take `other`'s value."""
        result = self
        for key, value in other.items():
            result = result.assoc(key, value)
        return result

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._index.get(key, default)

    def update(self, key: Hashable, transform: Callable[[Any], Any]) -> Frame:
        """Apply `transform` to the value at `key`; unchanged if `key` is absent."""
        if key not in self._index:
            return self
        return self.assoc(key, transform(self._index[key]))

    def select_keys(self, keys: Iterable[Hashable]) -> Frame:
        result = Frame()
        for key in keys:
            if key in self._index:
                result = result.assoc(key, self._index[key])
        return result

    def contains_key(self, key: Hashable) -> bool:
        return key in self._index

    def map_keys(self, transform: Callable[[Hashable], Hashable]) -> Frame:
        # colliding keys: last write wins
        return Frame((transform(key), self._index[key]) for key in self._order)

    def map_values(self, transform: Callable[[Any], Any]) -> Frame:
        index = pmap({key: transform(self._index[key]) for key in self._order})
        return Frame._make(index, self._order)
