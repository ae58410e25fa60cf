"""Pytest configuration and shared fixtures."""

import argparse
import random

import pytest

from string_util.config import StringUtilConfig
from string_util.presenters import NullPresenter
from string_util.services import NameGenerator


@pytest.fixture
def test_config():
    """Provide a configuration with a small, predictable syllable table."""
    return StringUtilConfig(
        syllables=("ka", "lo", "mi"),
        min_syllables=2,
        max_syllables=3,
    )


@pytest.fixture
def seeded_rng():
    """Provide a seeded random source for deterministic tests."""
    return random.Random(1234)


@pytest.fixture
def name_generator(test_config, seeded_rng):
    """Provide a name generator with a seeded random source."""
    return NameGenerator(test_config, rng=seeded_rng)


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.warnings = []
        self.errors = []
        self.lines = []
        self.comparisons = []

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_lines(self, lines: list[str]) -> None:
        self.lines.extend(lines)

    def show_comparison(self, left, right, result) -> None:
        self.comparisons.append((left, right, result))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


@pytest.fixture
def make_args():
    """Factory fixture for building argparse namespaces for command functions."""

    def _make(**kwargs):
        return argparse.Namespace(**kwargs)

    return _make
