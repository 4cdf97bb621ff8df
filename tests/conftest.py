"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path so tests run without an install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from casedrill.case_rules import STYLES, CaseStyle  # noqa: E402
from casedrill.challenge import Challenge, ChallengeGenerator  # noqa: E402
from casedrill.session import Difficulty, Session  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Game loop tests with a scripted screen")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class ScriptedGenerator:
    """Deals a fixed list of challenges in order, then repeats the last one."""

    def __init__(self, challenges: list[Challenge]):
        self.challenges = list(challenges)
        self.dealt = 0

    def next_challenge(self) -> Challenge:
        index = min(self.dealt, len(self.challenges) - 1)
        self.dealt += 1
        return self.challenges[index]


def style(label: str) -> CaseStyle:
    return next(s for s in STYLES if s.label == label)


@pytest.fixture
def snake_challenge():
    """create read -> create_read"""
    return Challenge(words=("create", "read"), style=style("snake case"))


@pytest.fixture
def camel_challenge():
    """user email address -> userEmailAddress"""
    return Challenge(words=("user", "email", "address"), style=style("camel case"))


@pytest.fixture
def seeded_generator():
    return ChallengeGenerator(random.Random(1234))


@pytest.fixture
def scripted(snake_challenge, camel_challenge):
    return ScriptedGenerator([snake_challenge, camel_challenge])


@pytest.fixture
def session(scripted):
    """A fresh session dealing scripted challenges."""
    return Session(scripted)


@pytest.fixture
def practicing(session):
    """Build a session already practicing at the given difficulty."""

    def _make(difficulty=Difficulty.NORMAL, score=0):
        session.player_name = "Al"
        session.confirm_name()
        session.select_mode(difficulty)
        session.score = score
        return session

    return _make


@pytest.fixture
def make_challenge():
    """Build a challenge from words and a style label."""

    def _make(words, label="snake case"):
        return Challenge(words=tuple(words), style=style(label))

    return _make
