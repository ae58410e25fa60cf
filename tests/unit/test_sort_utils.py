"""Tests for sort_utils module."""

import itertools
import random

import pytest

from string_util.models import Ordering
from string_util.utils.sort_utils import (
    natural_compare,
    natural_sort,
    natural_sort_key,
    natural_sorted,
)

SAMPLES = [
    None,
    "",
    ".",
    "..",
    ".5",
    "0",
    "00",
    "1",
    "1.",
    "1.2.3",
    "1.2.3abc",
    "1.2.4",
    "007",
    "7",
    "abc",
    "abcd",
    "ABC",
    "file2",
    "file10",
    "img9.png",
    "img10.png",
    "v1.25",
    "v1.5",
    "v007",
    "v7",
    "a1b2",
    "a01b2",
    "a1b02",
    "99999999999999999999999999999999999999",
    "99999999999999999999999999999999999998",
]

# Multi-dot runs compare as text against numbers, which is not transitive
WELL_FORMED = [s for s in SAMPLES if s is None or "1.2" not in s]


class TestNaturalCompareNulls:
    """Tests for None handling in natural_compare."""

    def test_none_equals_none(self):
        """Two Nones should compare equal."""
        assert natural_compare(None, None) == Ordering.EQUAL

    def test_none_sorts_before_string(self):
        """None should sort before any string, even an empty one."""
        assert natural_compare(None, "x") == Ordering.LESS
        assert natural_compare(None, "") == Ordering.LESS

    def test_string_sorts_after_none(self):
        """Any string should sort after None."""
        assert natural_compare("x", None) == Ordering.GREATER
        assert natural_compare("", None) == Ordering.GREATER


class TestNaturalCompare:
    """Tests for natural_compare ordering rules."""

    def test_numbers_compare_by_value(self):
        """Should compare digit runs numerically."""
        assert natural_compare("img9.png", "img10.png") == Ordering.LESS
        assert natural_compare("file2", "file10") == Ordering.LESS
        assert natural_compare("100", "20") == Ordering.GREATER

    def test_zero_padding_sorts_after(self):
        """Equal values with a longer literal should sort after."""
        assert natural_compare("v007", "v7") == Ordering.GREATER
        assert natural_compare("v7", "v007") == Ordering.LESS
        assert natural_compare("0", "00") == Ordering.LESS

    def test_decimal_runs(self):
        """Should compare runs containing a dot as decimal values."""
        assert natural_compare("v1.5", "v1.25") == Ordering.GREATER
        assert natural_compare("v1.25", "v1.5") == Ordering.LESS

    def test_leading_dot_starts_run(self):
        """A dot followed by a digit should start a numeric run."""
        assert natural_compare(".5", "0") == Ordering.GREATER
        assert natural_compare("x.5", "x.25") == Ordering.GREATER

    def test_lone_dot_is_a_character(self):
        """A dot not followed by a digit should compare as a plain character."""
        assert natural_compare(".", "0") == Ordering.LESS  # "." < "0" by code point
        assert natural_compare("a.", "a.") == Ordering.EQUAL

    def test_malformed_run_falls_back_to_text(self):
        """Multi-dot runs should compare as raw text."""
        assert natural_compare("1.2.3", "1.2.4") == Ordering.LESS
        assert natural_compare("1.2.4", "1.2.3") == Ordering.GREATER
        assert natural_compare("1.2.10", "1.2.9") == Ordering.LESS  # "1" < "9" as text

    def test_malformed_run_on_one_side_only(self):
        """Fallback should apply when only one run fails to parse."""
        assert natural_compare("1.2.3", "5") == Ordering.LESS
        assert natural_compare("9", "10.1.1") == Ordering.GREATER  # "9" > "1" as text

    def test_malformed_run_decides_immediately(self):
        """Fallback result should be returned without looking at the rest."""
        assert natural_compare("1.2.3zzz", "1.2.4aaa") == Ordering.LESS

    def test_equal_malformed_runs(self):
        """Identical malformed runs should compare equal."""
        assert natural_compare("1.2.3abc", "1.2.3abc") == Ordering.EQUAL
        assert natural_compare("1.2.3abc", "1.2.3abd") == Ordering.EQUAL

    def test_shorter_prefix_sorts_first(self):
        """A strict prefix should sort before the longer string."""
        assert natural_compare("abc", "abcd") == Ordering.LESS
        assert natural_compare("abcd", "abc") == Ordering.GREATER
        assert natural_compare("", "a") == Ordering.LESS

    def test_case_sensitive_ordinal(self):
        """Uppercase should sort before lowercase by code point."""
        assert natural_compare("ITEM3", "item1") == Ordering.LESS
        assert natural_compare("B", "a") == Ordering.LESS

    def test_number_vs_letter(self):
        """A digit against a letter should compare by code point."""
        assert natural_compare("a1", "aa") == Ordering.LESS

    def test_continues_after_equal_runs(self):
        """Comparison should resume after runs of equal value and length."""
        assert natural_compare("a10b", "a10c") == Ordering.LESS
        assert natural_compare("S1E10", "S1E2") == Ordering.GREATER

    def test_long_digit_runs_do_not_overflow(self):
        """Very long digit runs should compare exactly."""
        big = "9" * 60
        assert natural_compare(big + "1", big + "0") == Ordering.GREATER
        assert natural_compare("x" + big, "x1" + big) == Ordering.LESS

    def test_non_ascii_digits_compare_as_text(self):
        """Non-ASCII digits start a run but compare by code point, not value."""
        assert natural_compare("a٣", "a10") == Ordering.GREATER  # Arabic-Indic 3
        assert natural_compare("９", "10") == Ordering.GREATER  # fullwidth 9
        assert natural_compare("٣", "٣") == Ordering.EQUAL

    def test_non_ascii_run_falls_back_whole(self):
        """A non-ASCII run against an ASCII run should compare the runs as text."""
        assert natural_compare("x٣z", "x3a") == Ordering.GREATER
        assert natural_compare("x3a", "x٣z") == Ordering.LESS

    def test_returns_ordering(self):
        """Should return an Ordering usable as a plain int."""
        result = natural_compare("a", "b")
        assert isinstance(result, Ordering)
        assert result == -1


class TestNaturalCompareProperties:
    """Property checks over a fixed sample of awkward inputs."""

    @pytest.mark.parametrize("value", SAMPLES)
    def test_reflexive(self, value):
        """Every value should compare equal to itself."""
        assert natural_compare(value, value) == Ordering.EQUAL

    def test_antisymmetric(self):
        """compare(a, b) should be the negation of compare(b, a)."""
        for a, b in itertools.product(SAMPLES, repeat=2):
            assert natural_compare(a, b) == -natural_compare(b, a), (a, b)

    @pytest.mark.parametrize("value", ["", "....", "1.2.3abc", "000", ".1.", "1..2"])
    def test_never_raises(self, value):
        """Should return a result for odd inputs instead of raising."""
        for other in SAMPLES:
            assert natural_compare(value, other) in (
                Ordering.LESS,
                Ordering.EQUAL,
                Ordering.GREATER,
            )


class TestNaturalSort:
    """Tests for natural_sort and natural_sorted."""

    def test_end_to_end_scenario(self):
        """Should sort mixed-case numbered items."""
        items = ["item10", "item2", "item1", "ITEM3"]
        natural_sort(items)
        assert items == ["ITEM3", "item1", "item2", "item10"]

    def test_sorts_numeric_strings_naturally(self):
        """Should sort numbers numerically, not alphabetically."""
        files = ["file10.txt", "file2.txt", "file1.txt"]
        assert natural_sorted(files) == ["file1.txt", "file2.txt", "file10.txt"]

    def test_handles_leading_zeros(self):
        """Should order zero-padded numbers by value, padding last on ties."""
        files = ["ep01.mp4", "ep10.mp4", "ep2.mp4", "ep1.mp4"]
        assert natural_sorted(files) == ["ep1.mp4", "ep01.mp4", "ep2.mp4", "ep10.mp4"]

    def test_handles_multiple_numbers(self):
        """Should handle multiple number segments."""
        files = ["S1E10.mp4", "S1E2.mp4", "S2E1.mp4"]
        assert natural_sorted(files) == ["S1E2.mp4", "S1E10.mp4", "S2E1.mp4"]

    def test_none_entries_sort_first(self):
        """None entries should be accepted and sort first."""
        assert natural_sorted(["b", None, "a"]) == [None, "a", "b"]

    def test_reverse(self):
        """Should support descending order."""
        items = ["a2", "a10", "a1"]
        natural_sort(items, reverse=True)
        assert items == ["a10", "a2", "a1"]

    def test_natural_sort_is_in_place(self):
        """natural_sort should mutate the list and return None."""
        items = ["b", "a"]
        assert natural_sort(items) is None
        assert items == ["a", "b"]

    def test_natural_sort_accepts_none(self):
        """Passing None instead of a list should do nothing."""
        natural_sort(None)

    def test_natural_sorted_leaves_input(self):
        """natural_sorted should return a new list."""
        items = ("b", "a")
        result = natural_sorted(items)
        assert result == ["a", "b"]
        assert items == ("b", "a")

    def test_idempotent(self):
        """Sorting a sorted list should not change it."""
        once = natural_sorted(WELL_FORMED)
        assert natural_sorted(once) == once

    def test_sorting_reversed_output_restores_order(self):
        """Sorting the reversed output should give the sorted list back."""
        once = natural_sorted(WELL_FORMED)
        assert natural_sorted(reversed(once)) == once

    def test_shuffled_input_gives_same_order(self):
        """Any permutation of the input should sort to the same list."""
        expected = natural_sorted(WELL_FORMED)
        rng = random.Random(2024)
        for _ in range(20):
            shuffled = list(WELL_FORMED)
            rng.shuffle(shuffled)
            assert natural_sorted(shuffled) == expected

    def test_sorted_result_is_pairwise_ordered(self):
        """Neighbours in the sorted output should never be out of order."""
        result = natural_sorted(WELL_FORMED)
        for a, b in zip(result, result[1:]):
            assert natural_compare(a, b) != Ordering.GREATER, (a, b)

    def test_key_works_with_min_max(self):
        """natural_sort_key should work with min() and max()."""
        items = ["v10", "v9", "v100"]
        assert min(items, key=natural_sort_key) == "v9"
        assert max(items, key=natural_sort_key) == "v100"
