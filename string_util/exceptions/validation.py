"""Argument validation exceptions."""

from .base import StringUtilException


class InvalidInputError(StringUtilException, ValueError):
    """Raised when a helper is given an argument it cannot work with."""

    pass
