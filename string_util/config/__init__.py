"""Configuration management for String Util."""

from .config import DEFAULT_SYLLABLES, StringUtilConfig
from .defaults import create_default_config

__all__ = ["DEFAULT_SYLLABLES", "StringUtilConfig", "create_default_config"]
