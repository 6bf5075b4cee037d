"""Tests for domain enums."""
import pytest

from domain import ActivatableMixin, LockMode, ManagedObject, SortDirection
from fixture_models import Widget


class TestLockMode:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, LockMode.NONE),
            (LockMode.OPTIMISTIC, LockMode.OPTIMISTIC),
            ("pessimistic_write", LockMode.PESSIMISTIC_WRITE),
            ("NONE", LockMode.NONE),
        ],
    )
    def test_coerce(self, value, expected):
        assert LockMode.coerce(value) is expected

    def test_with_for_update(self):
        assert LockMode.NONE.with_for_update is None
        assert LockMode.OPTIMISTIC.with_for_update is None
        assert LockMode.PESSIMISTIC_READ.with_for_update == {"read": True}
        assert LockMode.PESSIMISTIC_WRITE.with_for_update is True

    def test_is_pessimistic(self):
        assert LockMode.PESSIMISTIC_READ.is_pessimistic
        assert not LockMode.OPTIMISTIC.is_pessimistic


class TestSortDirection:
    def test_coerce(self):
        assert SortDirection.coerce("asc") is SortDirection.ASC
        assert SortDirection.coerce(SortDirection.DESC) is SortDirection.DESC

    def test_invalid(self):
        with pytest.raises(ValueError):
            SortDirection.coerce("up")


class TestActivatableMixin:
    def test_is_new(self):
        widget = Widget(name="n")
        assert widget.is_new()
        widget.id = 3
        assert not widget.is_new()

    def test_satisfies_protocol(self):
        assert isinstance(Widget(name="n"), ManagedObject)
        assert issubclass(Widget, ActivatableMixin)

    def test_repr(self):
        assert repr(Widget(id=2, name="n", active=True)) == "<Widget id=2 active=True>"
