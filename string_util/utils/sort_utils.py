"""Sorting utilities, especially for natural sorting."""

import logging
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from functools import cmp_to_key

from string_util.models import Ordering

logger = logging.getLogger(__name__)


def _starts_numeric_run(text: str, index: int) -> bool:
    """Check whether a numeric run begins at ``index``.

    A run starts on a digit, or on a ``.`` immediately followed by a digit.
    """
    char = text[index]
    if char.isdecimal():
        return True
    return char == "." and index + 1 < len(text) and text[index + 1].isdecimal()


def _numeric_run_end(text: str, index: int) -> int:
    """Return the index just past the run of digits and dots at ``index``."""
    length = len(text)
    while index < length and (text[index].isdecimal() or text[index] == "."):
        index += 1
    return index


def _parse_decimal(run: str) -> Decimal | None:
    """Parse a numeric run, or return None if it is not a single decimal (e.g. ``1.2.3``).

    Only ASCII digits parse; runs of other Unicode digits fall back to text.
    """
    if not run.isascii():
        return None
    try:
        return Decimal(run)
    except InvalidOperation:
        return None


def natural_compare(left: str | None, right: str | None) -> Ordering:
    """Compare two strings in natural order.

    Characters are compared by code point, except that runs of digits
    (optionally containing a decimal point) are compared by numeric value:
    img9.png < img10.png, v1.25 < v1.5.

    Rules:
        - None sorts before any string; two Nones are equal.
        - Runs with equal value are ordered by literal length, so the
          zero-padded form sorts after the short one (v7 < v007).
        - A run that is not a valid decimal on either side, such as
          ``1.2.3``, makes the two runs compare as plain text and decides
          the result on the spot.
        - If one string is a prefix of the other, the shorter sorts first.

    Never raises for any pair of strings.

    Args:
        left: First string (may be None)
        right: Second string (may be None)

    Returns:
        Ordering of left relative to right

    Example:
        natural_compare("file2", "file10")
        # Returns: Ordering.LESS
    """
    if left is None:
        return Ordering.EQUAL if right is None else Ordering.LESS
    if right is None:
        return Ordering.GREATER

    left_index = 0
    right_index = 0
    left_length = len(left)
    right_length = len(right)

    while left_index < left_length and right_index < right_length:
        if _starts_numeric_run(left, left_index) and _starts_numeric_run(right, right_index):
            left_end = _numeric_run_end(left, left_index)
            right_end = _numeric_run_end(right, right_index)
            left_run = left[left_index:left_end]
            right_run = right[right_index:right_end]
            left_index = left_end
            right_index = right_end

            left_value = _parse_decimal(left_run)
            right_value = _parse_decimal(right_run)
            if left_value is None or right_value is None:
                logger.debug(f"Comparing numeric runs as text: {left_run!r} vs {right_run!r}")
                return Ordering.of(left_run, right_run)

            result = Ordering.of(left_value, right_value)
            if result != Ordering.EQUAL:
                return result

            # Same value: the longer literal (leading zeros) sorts after
            result = Ordering.of(len(left_run), len(right_run))
            if result != Ordering.EQUAL:
                return result
            continue

        result = Ordering.of(left[left_index], right[right_index])
        if result != Ordering.EQUAL:
            return result
        left_index += 1
        right_index += 1

    # Shorter string sorts first
    return Ordering.of(left_length, right_length)


natural_sort_key = cmp_to_key(natural_compare)
"""Key function wrapping natural_compare, for sorted(), min(), max() and list.sort()."""


def natural_sort(items: list[str | None] | None, reverse: bool = False) -> None:
    """Sort a list of strings in place using natural_compare.

    None entries are allowed and sort first. Passing None instead of a list
    does nothing.

    Args:
        items: List to sort in place
        reverse: Sort in descending order
    """
    if items is None:
        return
    items.sort(key=natural_sort_key, reverse=reverse)


def natural_sorted(items: Iterable[str | None], reverse: bool = False) -> list[str | None]:
    """Return a new naturally sorted list, leaving the input untouched.

    Args:
        items: Strings to sort (None entries allowed)
        reverse: Sort in descending order

    Returns:
        New list in natural order

    Example:
        natural_sorted(["item10", "item2", "item1", "ITEM3"])
        # Returns: ["ITEM3", "item1", "item2", "item10"]
    """
    return sorted(items, key=natural_sort_key, reverse=reverse)
