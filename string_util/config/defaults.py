"""Default configuration values for String Util."""

from .config import StringUtilConfig


def create_default_config(**overrides) -> StringUtilConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        StringUtilConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            min_syllables=1,
            table_separator=" | "
        )
    """
    return StringUtilConfig(**overrides)
