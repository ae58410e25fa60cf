"""Random syllable-based name generation."""

import logging
import random

from string_util.config import StringUtilConfig
from string_util.exceptions import InvalidInputError
from string_util.utils.text_utils import to_upper_first

logger = logging.getLogger(__name__)


class NameGenerator:
    """Generate pronounceable names by stringing random syllables together.

    The random source is owned by the generator. Pass a seeded
    ``random.Random`` for reproducible output.
    """

    def __init__(self, config: StringUtilConfig | None = None, rng: random.Random | None = None):
        """Initialize the generator.

        Args:
            config: Configuration providing the syllable table and default range
            rng: Random source (a new unseeded one is created if omitted)
        """
        self.config = config or StringUtilConfig()
        self._rng = rng or random.Random()

    def generate(self, syllable_count: int | None = None) -> str:
        """Generate a single capitalized name.

        Args:
            syllable_count: Number of syllables, or None to draw one from the
                configured min/max range (inclusive)

        Returns:
            Generated name, e.g. "Kalnab"

        Raises:
            InvalidInputError: If syllable_count is negative or there are no syllables
        """
        syllables = self.config.syllables
        if not syllables:
            raise InvalidInputError("No syllables configured")

        if syllable_count is None:
            syllable_count = self._rng.randint(self.config.min_syllables, self.config.max_syllables)
            logger.debug(f"Drew syllable count {syllable_count}")
        elif syllable_count < 0:
            raise InvalidInputError(f"Syllable count must be >= 0, got {syllable_count}")

        parts = [self._rng.choice(syllables) for _ in range(syllable_count)]
        return to_upper_first("".join(parts))

    def generate_many(self, count: int, syllable_count: int | None = None) -> list[str]:
        """Generate several names.

        Args:
            count: Number of names to generate
            syllable_count: Passed through to generate()

        Returns:
            List of generated names
        """
        if count < 0:
            raise InvalidInputError(f"Name count must be >= 0, got {count}")
        return [self.generate(syllable_count) for _ in range(count)]
