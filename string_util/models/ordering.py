"""Result type for pairwise string comparison."""

from enum import IntEnum


class Ordering(IntEnum):
    """Outcome of comparing two values.

    Members are plain ints (-1, 0, 1), so a comparison function returning
    an Ordering can be handed straight to ``functools.cmp_to_key``.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left, right) -> "Ordering":
        """Order two mutually comparable values."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL

    @property
    def label(self) -> str:
        """Lowercase name, e.g. ``"less"``."""
        return self.name.lower()
