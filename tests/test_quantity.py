"""Tests for quantity parsing and merging."""

import pytest

from shelflife.quantity import merge_quantities, normalize_unit, parse_quantity


class TestParseQuantity:
    def test_decimal_with_unit(self):
        assert parse_quantity("1.5 kg") == (1.5, "kg")

    def test_plural_unit_is_singularized(self):
        assert parse_quantity("2 units") == (2.0, "unit")

    def test_bare_number(self):
        assert parse_quantity("10") == (10.0, "")

    def test_unit_without_space(self):
        assert parse_quantity("200g") == (200.0, "g")

    def test_surrounding_whitespace(self):
        assert parse_quantity("  3 Cups ") == (3.0, "cup")

    @pytest.mark.parametrize("text", ["", "a bunch", "units 3", "one loaf"])
    def test_unparseable(self, text):
        assert parse_quantity(text) is None


class TestNormalizeUnit:
    def test_case_and_plural(self):
        assert normalize_unit("Units") == "unit"
        assert normalize_unit("unit") == "unit"

    def test_only_one_s_is_stripped(self):
        assert normalize_unit("glass") == "glas"

    def test_irregular_plural_not_reduced(self):
        assert normalize_unit("loaves") == "loave"


class TestMergeQuantities:
    def test_same_unit_summed_and_pluralized(self):
        assert merge_quantities("1 unit", "2 units") == "3 units"

    def test_sum_of_one_keeps_unit(self):
        assert merge_quantities("0.5 kg", "0.5 kg") == "1 kg"

    def test_case_insensitive_units(self):
        assert merge_quantities("1 Unit", "1 units") == "2 units"

    def test_bare_numbers(self):
        assert merge_quantities("10", "5") == "15"

    def test_decimal_sum(self):
        assert merge_quantities("1.5 l", "1 l") == "2.5 ls"

    def test_different_units_concatenated(self):
        assert merge_quantities("2 kg", "3 units") == "2 kg + 3 units"

    def test_unparseable_concatenated(self):
        assert merge_quantities("a bunch", "2 units") == "a bunch + 2 units"

    def test_number_and_unit_mismatch(self):
        assert merge_quantities("2", "2 units") == "2 + 2 units"

    def test_never_empty(self):
        assert merge_quantities("", "") == " + "
