"""Utility functions for String Util."""

from .sort_utils import natural_compare, natural_sort, natural_sort_key, natural_sorted
from .table_utils import generate_string_table
from .text_utils import (
    contains_ignore_case,
    contains_substring,
    equals_ignore_case,
    join,
    nicify_string,
    quote,
    safe_to_string,
    to_upper_first,
    unbracket,
    unquote,
)

__all__ = [
    "natural_compare",
    "natural_sort",
    "natural_sort_key",
    "natural_sorted",
    "generate_string_table",
    "to_upper_first",
    "contains_ignore_case",
    "equals_ignore_case",
    "contains_substring",
    "nicify_string",
    "quote",
    "unquote",
    "unbracket",
    "safe_to_string",
    "join",
]
