"""Bounded insertion-ordered key set with FIFO eviction."""

from collections import OrderedDict


class BoundedKeySet:
    """Remembers at most ``capacity`` keys; adding past capacity evicts the oldest.

    Not synchronized. The owner serializes access.
    """

    def __init__(self, capacity: int = 200):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._keys: OrderedDict[str, None] = OrderedDict()

    def add(self, key: str) -> bool:
        """Record ``key``; False if it was already present."""
        if key in self._keys:
            return False
        self._keys[key] = None
        while len(self._keys) > self.capacity:
            self._keys.popitem(last=False)
        return True

    def __contains__(self, key) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self):
        return iter(self._keys)

    def clear(self) -> None:
        self._keys.clear()
