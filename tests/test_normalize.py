"""Tests for raw-string coercion helpers."""

import pytest

from modelyaml.normalize import format_number, to_list, to_number, to_number_list


class TestToNumber:
    def test_empty_string_falls_back(self):
        assert to_number("", 7) == 7

    def test_whitespace_only_falls_back(self):
        assert to_number("   ", 7) == 7

    def test_non_numeric_falls_back(self):
        assert to_number("abc", 7) == 7

    def test_decimal(self):
        assert to_number("3.5", 7) == 3.5

    def test_surrounding_whitespace_ignored(self):
        assert to_number("  42 ", 0) == 42

    @pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity", "1e999"])
    def test_non_finite_falls_back(self, raw):
        """Values that would parse to NaN or infinity never leak through."""
        assert to_number(raw, 1) == 1

    def test_exponent_and_sign(self):
        assert to_number("-2.5e3", 0) == -2500
        assert to_number(".5", 0) == 0.5

    def test_underscore_separators_rejected(self):
        assert to_number("1_000", 9) == 9

    def test_negative_values_pass_through(self):
        """No clamping: a negative temperature is rendered as typed."""
        assert to_number("-0.3", 0.7) == -0.3


class TestToList:
    def test_trims_and_drops_empty_segments(self):
        assert to_list("a, b ,,c") == ["a", "b", "c"]

    def test_empty_and_blank_input(self):
        assert to_list("") == []
        assert to_list("  ,  , ") == []

    def test_keeps_order_and_duplicates(self):
        assert to_list("gguf, mlx, gguf") == ["gguf", "mlx", "gguf"]


class TestToNumberList:
    def test_drops_non_numeric_items(self):
        assert to_number_list("1, x, 3") == [1, 3]

    def test_invalid_items_are_not_replaced(self):
        assert to_number_list("x, , nan") == []

    def test_preserves_order(self):
        assert to_number_list("8192, 4096, 32768") == [8192, 4096, 32768]


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0"),
            (-0.0, "0"),
            (20, "20"),
            (20.0, "20"),
            (0.7, "0.7"),
            (6000000000.0, "6000000000"),
            (256000.0, "256000"),
            (-2.5, "-2.5"),
            (1e16, "10000000000000000"),
            (0.000015, "0.000015"),
            (1e-7, "1e-7"),
            (1.5e22, "1.5e+22"),
            (1e21, "1e+21"),
        ],
    )
    def test_rendering(self, value, expected):
        assert format_number(value) == expected
