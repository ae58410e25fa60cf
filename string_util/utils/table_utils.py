"""Plain-text table rendering."""

from collections.abc import Callable, Sequence
from typing import Any

from string_util.exceptions import TableShapeError


def generate_string_table(
    rows: Sequence[Sequence[Any]],
    separator: str = "\t",
    include_headers: bool = False,
    line_prepend: str = "",
    line_append: str = "",
    to_string: Callable[[Any], str] | None = None,
) -> str:
    """Render a rectangular grid of values as text, one line per row.

    Every cell is followed by the separator, including the last cell of a
    line. Each line is wrapped as ``line_prepend + cells + line_append``
    and ends with a newline.

    Args:
        rows: Rows of cell values, all of the same length
        separator: Text written after each cell
        include_headers: Emit a "Column 1", "Column 2", ... line first
        line_prepend: Text added at the start of every line (e.g. indentation)
        line_append: Text added at the end of every line
        to_string: Cell formatter, defaults to str()

    Returns:
        The rendered table, "" when there are no rows

    Raises:
        TableShapeError: If rows have different lengths

    Example:
        generate_string_table([[1, 2], [3, 4]], include_headers=True)
        # Returns: "Column 1\\tColumn 2\\t\\n1\\t2\\t\\n3\\t4\\t\\n"
    """
    if not rows:
        return ""

    format_cell = to_string or str
    columns = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != columns:
            raise TableShapeError(index, columns, len(row))

    lines = []
    if include_headers:
        headers = "".join(f"Column {i + 1}{separator}" for i in range(columns))
        lines.append(f"{line_prepend}{headers}{line_append}\n")

    for row in rows:
        cells = "".join(f"{format_cell(cell)}{separator}" for cell in row)
        lines.append(f"{line_prepend}{cells}{line_append}\n")

    return "".join(lines)
