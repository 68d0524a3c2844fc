"""Ordered key/value storage for parsed input data.

InputMap keeps its keys sorted under the input key order (see keys.py)
so that a section's entries and a list's elements are adjacent. Lookups
by exact key go through a hash map; range scans start from a
lower-bound seek over the sorted key list.
"""

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Mapping

from .keys import input_sort_key


class InputMap(Mapping[str, str]):
    """Mapping of input keys to string values, iterated in key order."""

    def __init__(self, items: Mapping[str, str] | Iterable[tuple[str, str]] | None = None):
        self._keys: list[str] = []
        self._values: dict[str, str] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                self[key] = value

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        if key not in self._values:
            pos = bisect_left(self._keys, input_sort_key(key), key=input_sort_key)
            self._keys.insert(pos, key)
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {self._values[k]!r}" for k in self._keys)
        return f"InputMap({{{body}}})"

    def lower_bound(self, key: str) -> int:
        """Position of the first stored key that does not sort before ``key``."""
        return bisect_left(self._keys, input_sort_key(key), key=input_sort_key)

    def key_at(self, pos: int) -> str:
        """Stored key at position ``pos`` in key order."""
        return self._keys[pos]

    def iter_from(self, key: str) -> Iterator[tuple[str, str]]:
        """Yield (key, value) pairs starting at the lower bound of ``key``."""
        for pos in range(self.lower_bound(key), len(self._keys)):
            found = self._keys[pos]
            yield found, self._values[found]

    def iter_prefix(self, prefix: str) -> Iterator[tuple[str, str]]:
        """Yield pairs from the lower bound of ``prefix`` while keys start with it."""
        for found, value in self.iter_from(prefix):
            if not found.startswith(prefix):
                break
            yield found, value
