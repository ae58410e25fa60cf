"""Custom exceptions for String Util."""

from .base import StringUtilException
from .table import TableShapeError
from .validation import InvalidInputError

__all__ = [
    "StringUtilException",
    "InvalidInputError",
    "TableShapeError",
]
