"""Base exception classes for String Util."""


class StringUtilException(Exception):
    """Base exception for all String Util errors.

    All custom exceptions in the string_util package should inherit
    from this base class for consistent error handling.
    """

    pass
