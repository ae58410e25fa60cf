"""Table rendering exceptions."""

from .base import StringUtilException


class TableShapeError(StringUtilException):
    """Raised when table rows do not all have the same number of columns."""

    def __init__(self, row_index: int, expected: int, actual: int):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row_index} has {actual} columns, expected {expected}")
