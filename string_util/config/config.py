"""Configuration classes for String Util."""

from dataclasses import dataclass, field

from string_util.exceptions import InvalidInputError

DEFAULT_SYLLABLES: tuple[str, ...] = (
    "abri", "aco", "ad", "bal", "ben", "ca", "lor", "da", "de", "fa",
    "fe", "ga", "ge", "ha", "he", "ja", "je", "ka", "ke", "la",
    "lem", "ma", "me", "nab", "nel", "pa", "pe", "rab", "re", "jef",
    "pan", "ta", "del", "va", "ve", "wa", "we", "da", "kal", "ya",
    "ye", "tor", "pel",
)  # fmt: skip


@dataclass(frozen=True)
class StringUtilConfig:
    """Immutable configuration for the formatting helpers.

    All configuration is frozen (immutable) so a single instance can be
    shared between generators and CLI commands.
    """

    # Name generation settings
    syllables: tuple[str, ...] = field(default_factory=lambda: DEFAULT_SYLLABLES)
    min_syllables: int = 2
    max_syllables: int = 3  # Inclusive

    # Table rendering settings
    table_separator: str = "\t"
    table_include_headers: bool = False
    csv_delimiter: str = ","  # Delimiter for CLI table input

    def __post_init__(self):
        """Normalize syllables to a tuple and validate the syllable range."""
        if not isinstance(self.syllables, tuple):
            object.__setattr__(self, "syllables", tuple(self.syllables))
        if self.min_syllables < 0 or self.min_syllables > self.max_syllables:
            raise InvalidInputError(
                f"Invalid syllable range: {self.min_syllables}..{self.max_syllables}"
            )
