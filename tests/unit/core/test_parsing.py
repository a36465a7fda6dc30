"""
Unit tests for numeric and boolean literal parsing.
"""

import math

import pytest

from object_finder.core.config.schema import FinderSettings
from object_finder.core.parsing import parse_bool, parse_number


class TestParseNumber:
    """Tests for parse_number()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("42", 42),
            ("-7", -7),
            ("+3", 3),
            ("0x1F", 31),
            ("-0x10", -16),
            ("3.14", 3.14),
            ("1.", 1.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("-2.5E-1", -0.25),
            ("  12  ", 12),
            ("Infinity", math.inf),
            ("-Infinity", -math.inf),
        ],
    )
    def test_valid_literals(self, text, expected):
        result = parse_number(text)
        assert result == expected
        assert type(result) is type(expected)

    def test_integers_stay_integers(self):
        """An integer literal parses to int, never float."""
        assert isinstance(parse_number("10"), int)
        assert isinstance(parse_number("1e1"), float)

    def test_nan(self):
        assert math.isnan(parse_number("NaN"))

    def test_huge_integer_literals(self):
        """Literals past the int digit limit still parse."""
        assert parse_number("1" * 5000) > 10**4000
        assert parse_number("-" + "9" * 5000) < -(10**4000)
        assert parse_number("1" * 400) == int("1" * 400)

    @pytest.mark.parametrize(
        "text",
        ["", " ", "abc", "1_000", "inf", "nan", "0o17", "0b11", "1.2.3", "12abc", "--1", "٣"],
    )
    def test_invalid_literals(self, text):
        """Python-only forms and garbage are rejected."""
        assert parse_number(text) is None

    def test_whitespace_kept_when_trimming_disabled(self):
        settings = FinderSettings(trim_whitespace=False)
        assert parse_number(" 12", settings) is None
        assert parse_number("12", settings) == 12

    def test_hex_disabled(self):
        settings = FinderSettings(allow_hex_integers=False)
        assert parse_number("0x1F", settings) is None

    def test_special_floats_disabled(self):
        settings = FinderSettings(allow_special_floats=False)
        assert parse_number("Infinity", settings) is None
        assert parse_number("NaN", settings) is None


class TestParseBool:
    """Tests for parse_bool()."""

    def test_literals(self):
        assert parse_bool("true") is True
        assert parse_bool("false") is False

    @pytest.mark.parametrize("text", ["True", "FALSE", "yes", "1", "", " true"])
    def test_strict_by_default(self, text):
        assert parse_bool(text) is None

    def test_case_insensitive(self):
        settings = FinderSettings(case_sensitive_booleans=False)
        assert parse_bool("TRUE", settings) is True
        assert parse_bool("False", settings) is False
        assert parse_bool("yes", settings) is None
