"""Console presenter for CLI output."""

import sys

from string_util.models import Ordering


class ConsolePresenter:
    """Present output to console (CLI implementation).

    Results go to stdout; diagnostics go to stderr so piped output stays clean.
    """

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}", file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_lines(self, lines: list[str]) -> None:
        """Display result lines on stdout."""
        for line in lines:
            print(line)

    def show_comparison(self, left: str, right: str, result: Ordering) -> None:
        """Display the comparison label on stdout."""
        print(result.label)
