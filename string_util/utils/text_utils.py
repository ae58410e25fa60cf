"""Text processing utilities."""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from string_util.exceptions import InvalidInputError

T = TypeVar("T")

QUOTE = '"'
ESCAPED_QUOTE = '\\"'


def _upper_char(char: str) -> str:
    """Upper-case one character, keeping it if its uppercase form is several characters (ß)."""
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _upper_each(text: str) -> str:
    return "".join(_upper_char(char) for char in text)


def to_upper_first(text: str | None) -> str:
    """Upper-case the first character, leaving the rest untouched.

    Args:
        text: Input text (may be None)

    Returns:
        Text with a capitalized first character, or "" for None/empty input
    """
    if not text:
        return ""
    return _upper_char(text[0]) + text[1:]


def contains_ignore_case(text: str | None, value: str) -> bool:
    """Case-insensitive substring test, one character at a time. None never contains anything."""
    if text is None:
        return False
    return _upper_each(value) in _upper_each(text)


def equals_ignore_case(a: str | None, b: str | None) -> bool:
    """Case-insensitive equality, one character at a time. Two Nones are equal.

    Characters are matched individually, so "Straße" does not equal "STRASSE".
    """
    if a is None or b is None:
        return a is b
    return _upper_each(a) == _upper_each(b)


def contains_substring(items: Iterable[str | None], sub: str, ignore_case: bool = False) -> bool:
    """Check whether any non-None item contains a substring.

    Args:
        items: Strings to scan (None entries are skipped)
        sub: Substring to look for
        ignore_case: Compare case-insensitively

    Returns:
        True on the first match, False otherwise
    """
    for item in items:
        if item is None:
            continue
        if ignore_case:
            if contains_ignore_case(item, sub):
                return True
        elif sub in item:
            return True
    return False


def nicify_string(text: str | None) -> str | None:
    """Turn CamelCase, PascalCase or snake_case into spaced, capitalized text.

    Underscores become spaces, a space is inserted wherever a lowercase
    letter is followed by an uppercase one, and the first character is
    upper-cased.

    Args:
        text: Identifier-like text

    Returns:
        The "nicified" text; None, empty or whitespace-only input is returned unchanged

    Example:
        nicify_string("myField_name")
        # Returns: "My Field name"
    """
    if text is None or not text.strip():
        return text

    result = []
    previous = ""
    for char in text.replace("_", " "):
        if previous.islower() and char.isupper():
            result.append(" ")
        result.append(char)
        previous = char

    return to_upper_first("".join(result))


def quote(raw: str) -> str:
    """Wrap text in double quotes, escaping embedded quotes as \\".

    Raises:
        InvalidInputError: If raw is None
    """
    if raw is None:
        raise InvalidInputError("Cannot quote None")
    return QUOTE + raw.replace(QUOTE, ESCAPED_QUOTE) + QUOTE


def _strip_delimiters(text: str, opening: str, closing: str) -> str:
    trimmed = text.strip()
    if len(trimmed) >= 2 and trimmed[0] == opening and trimmed[-1] == closing:
        return trimmed[1:-1].replace(ESCAPED_QUOTE, QUOTE)
    return text


def unquote(quoted: str) -> str:
    """Remove surrounding double quotes and restore escaped quotes.

    Surrounding whitespace is ignored when looking for the quotes. Text that
    is not properly quoted is returned unchanged.

    Args:
        quoted: Text that may be surrounded by quotes

    Returns:
        The unquoted text

    Raises:
        InvalidInputError: If quoted is None
    """
    if quoted is None:
        raise InvalidInputError("Cannot unquote None")
    return _strip_delimiters(quoted, QUOTE, QUOTE)


def unbracket(bracketed: str) -> str:
    """Remove surrounding curly braces, like unquote does for quotes.

    Escaped quotes inside the braces are restored as well.

    Raises:
        InvalidInputError: If bracketed is None
    """
    if bracketed is None:
        raise InvalidInputError("Cannot unbracket None")
    return _strip_delimiters(bracketed, "{", "}")


def safe_to_string(obj: Any) -> str:
    """Convert any object to a string, using "null" for None."""
    if obj is None:
        return "null"
    return str(obj)


def join(
    items: Iterable[T],
    to_string: Callable[[T], str] = str,
    separator: str = ", ",
) -> str:
    """Join items after converting each one with a custom function.

    Exceptions raised by ``to_string`` propagate unchanged.

    Args:
        items: Items to join
        to_string: Function converting an item to text
        separator: Text placed between items

    Returns:
        Joined text, "" for an empty sequence

    Raises:
        InvalidInputError: If items, to_string or separator is None
    """
    if items is None or to_string is None or separator is None:
        raise InvalidInputError("join() requires items, to_string and separator")
    return separator.join(to_string(item) for item in items)
