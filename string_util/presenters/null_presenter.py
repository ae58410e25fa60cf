"""Null presenter for testing (no output)."""

from string_util.models import Ordering


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_lines(self, lines: list[str]) -> None:
        """Display result lines (no-op)."""
        pass

    def show_comparison(self, left: str, right: str, result: Ordering) -> None:
        """Display a comparison result (no-op)."""
        pass
