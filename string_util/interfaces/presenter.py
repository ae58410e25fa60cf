"""Presenter protocol for output abstraction."""

from typing import Protocol

from string_util.models import Ordering


class PresenterProtocol(Protocol):
    """Interface for presenting command output to the user.

    Commands talk only to this protocol, so the same command code can
    print to a console or be silenced in tests.
    """

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_lines(self, lines: list[str]) -> None:
        """Display result lines, one per line.

        Args:
            lines: Lines to display
        """
        ...

    def show_comparison(self, left: str, right: str, result: Ordering) -> None:
        """Display the outcome of comparing two strings.

        Args:
            left: First compared string
            right: Second compared string
            result: Ordering of left relative to right
        """
        ...
