"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter
from .null_presenter import NullPresenter

__all__ = [
    "ConsolePresenter",
    "NullPresenter",
]
