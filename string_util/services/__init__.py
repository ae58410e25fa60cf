"""Services for String Util."""

from .name_generator import NameGenerator

__all__ = ["NameGenerator"]
