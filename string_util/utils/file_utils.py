"""Input helpers for the command-line front-end."""

import sys
from pathlib import Path


def split_lines(text: str) -> list[str]:
    """Split text on newlines only.

    Unlike ``str.splitlines()``, form feeds, ``\\x1c``-``\\x1e``, ``\\x85`` and
    the Unicode line/paragraph separators stay inside their line. A trailing
    ``\\r`` is dropped from each line, and a final empty line is not returned.

    Args:
        text: Text to split

    Returns:
        List of lines without line terminators
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: Path | None) -> list[str]:
    """Read text lines from a file, or from stdin when no path is given.

    Args:
        path: File to read, or None for stdin

    Returns:
        List of lines without line terminators

    Raises:
        FileNotFoundError: If path does not exist
    """
    if path is None:
        return split_lines(sys.stdin.read())
    return split_lines(path.read_text(encoding="utf-8"))
