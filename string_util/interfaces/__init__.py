"""Interface protocols for String Util."""

from .presenter import PresenterProtocol

__all__ = ["PresenterProtocol"]
