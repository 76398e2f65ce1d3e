"""Tests for the request-scoped attribute bag."""

import pytest

from reqview.core.attributes import Attributes
from reqview.core.exceptions import IllegalStateError


class TestAttributes:
    """Tests for the Attributes class."""

    def test_set_and_get(self) -> None:
        """Verify set/get operations."""
        attributes = Attributes()
        attributes.set("user", "alice")
        assert attributes.get("user") == "alice"
        assert attributes.has("user")

    def test_last_write_wins(self) -> None:
        """Verify the same key shadows the previous value."""
        attributes = Attributes()
        attributes.set("k", "v1")
        attributes.set("k", "v2")
        assert attributes.get("k") == "v2"
        assert len(attributes) == 1

    def test_get_missing_returns_none(self) -> None:
        """Verify unset names give None without raising."""
        assert Attributes().get("missing") is None

    def test_remove(self) -> None:
        """Verify remove reports whether something was removed."""
        attributes = Attributes()
        attributes.set("k", 0)
        assert attributes.remove("k") is True
        assert attributes.remove("k") is False
        assert "k" not in attributes

    def test_falsy_values_are_stored(self) -> None:
        """Verify falsy but non-None values count as set."""
        attributes = Attributes()
        attributes.set("empty", "")
        attributes.set("zero", 0)
        assert attributes.has("empty")
        assert attributes.get("zero") == 0
        assert attributes.remove("empty") is True

    @pytest.mark.parametrize(("name", "value"), [(None, "v"), ("k", None)])
    def test_set_rejects_none(self, name, value) -> None:
        """Verify None names and values are contract violations."""
        attributes = Attributes()
        with pytest.raises(IllegalStateError):
            attributes.set(name, value)
        assert len(attributes) == 0

    @pytest.mark.parametrize("operation", ["has", "get", "remove"])
    def test_lookups_reject_none(self, operation: str) -> None:
        """Verify None lookup names are contract violations."""
        with pytest.raises(IllegalStateError):
            getattr(Attributes(), operation)(None)

    def test_iter_and_repr(self) -> None:
        """Verify iteration over names and string representation."""
        attributes = Attributes()
        attributes.set("a", 1)
        attributes.set("b", 2)
        assert set(attributes) == {"a", "b"}
        assert "a" in repr(attributes)

    def test_clear(self) -> None:
        """Verify clear removes all data."""
        attributes = Attributes()
        attributes.set("a", 1)
        attributes.clear()
        assert "a" not in attributes
