"""
Unit tests for object_finder.core.predicates.
"""

from object_finder.core.predicates import (
    equals,
    is_list,
    is_list_of_map,
    is_map,
    is_not_valid,
    is_valid,
    verified,
)


class TestValidity:
    """Tests for is_valid, is_not_valid and verified."""

    def test_present_value(self):
        obj = "Hello"
        assert is_valid(obj) is True
        assert is_not_valid(obj) is False
        assert verified(obj) == "Hello"

    def test_absent_value(self):
        obj = None
        assert is_valid(obj) is False
        assert is_not_valid(obj) is True
        assert verified(obj) is None

    def test_falsy_values_are_valid(self):
        """Only None counts as absent."""
        for value in (0, "", [], {}, False):
            assert is_valid(value)
            assert verified(value) is value


class TestShapes:
    """Tests for is_map, is_list and is_list_of_map."""

    def test_is_map(self):
        assert is_map({"a": 1})
        assert not is_map([("a", 1)])
        assert not is_map(None)

    def test_is_list(self):
        assert is_list([1, 2, 3])
        assert is_list((1, 2))
        assert not is_list("123")
        assert not is_list({"a": 1})

    def test_is_list_of_map(self):
        assert is_list_of_map([{"a": 1}, {"b": 2}])
        assert not is_list_of_map([1, 2, 3])
        assert not is_list_of_map([{"a": 1}, 2])
        assert not is_list_of_map({"a": 1})

    def test_empty_list_is_list_of_map(self):
        """The check is vacuously true for an empty sequence."""
        assert is_list_of_map([])


class TestEquals:
    """Tests for the type-strict equality check."""

    def test_same_type_and_value(self):
        a = 5
        b = 5
        assert equals(a, b) is True

    def test_int_and_float_differ(self):
        assert equals(5, 5.0) is False

    def test_int_and_bool_differ(self):
        assert equals(1, True) is False

    def test_unequal_values(self):
        assert equals("a", "b") is False

    def test_none_never_equals(self):
        assert equals(None, None) is False

    def test_containers(self):
        assert equals({"a": [1]}, {"a": [1]})
        assert not equals([1, 2], (1, 2))
