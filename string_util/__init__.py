"""
String Util - String Formatting Helpers

Natural-order comparison and sorting of strings that embed numbers,
plus small case, quoting, table and name generation helpers.
"""

__version__ = "1.0.0"
__author__ = "String Util Contributors"

from .models import Ordering
from .services import NameGenerator
from .utils import (
    contains_ignore_case,
    contains_substring,
    equals_ignore_case,
    generate_string_table,
    join,
    natural_compare,
    natural_sort,
    natural_sort_key,
    natural_sorted,
    nicify_string,
    quote,
    safe_to_string,
    to_upper_first,
    unbracket,
    unquote,
)

__all__ = [
    "Ordering",
    "NameGenerator",
    "natural_compare",
    "natural_sort",
    "natural_sorted",
    "natural_sort_key",
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
    "generate_string_table",
]
