"""Data models for String Util."""

from .ordering import Ordering

__all__ = ["Ordering"]
