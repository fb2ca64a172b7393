"""Tests for the bounded transition history."""

import pytest

from dispatch.transitions.key_set import BoundedKeySet


class TestBoundedKeySet:
    def test_add_new_key(self):
        keys = BoundedKeySet(capacity=3)
        assert keys.add("a") is True
        assert "a" in keys
        assert len(keys) == 1

    def test_add_duplicate_returns_false(self):
        keys = BoundedKeySet(capacity=3)
        keys.add("a")
        assert keys.add("a") is False
        assert len(keys) == 1

    def test_evicts_oldest_first(self):
        keys = BoundedKeySet(capacity=3)
        for key in ["a", "b", "c", "d"]:
            keys.add(key)
        assert list(keys) == ["b", "c", "d"]
        assert "a" not in keys

    def test_never_exceeds_capacity(self):
        keys = BoundedKeySet(capacity=200)
        for i in range(250):
            keys.add(f"tenant-{i}:pending->approved")
            assert len(keys) <= 200
        assert len(keys) == 200
        assert "tenant-49:pending->approved" not in keys
        assert "tenant-50:pending->approved" in keys

    def test_default_capacity(self):
        assert BoundedKeySet().capacity == 200

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            BoundedKeySet(capacity=0)

    def test_clear(self):
        keys = BoundedKeySet()
        keys.add("a")
        keys.clear()
        assert len(keys) == 0
