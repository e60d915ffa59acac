"""Shared fixtures for the RUSDLE test suite."""

import os
import random
import tempfile

# Keep log files out of the working tree; must happen before rusdle is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="rusdle-logs-"))

import pytest

from rusdle.services.dictionary import Dictionary
from rusdle.services.session import GameSession

TEST_WORDS = [
    "teats", "stews", "allot", "lolly", "crane", "slate", "trace", "crate",
    "react", "plant", "treat", "tease", "eaten", "heart", "cabin", "lemon",
    "llama", "fluid", "moist", "pound",
]


@pytest.fixture
def dictionary():
    """Small dictionary with a fixed random source."""
    return Dictionary(TEST_WORDS, rng=random.Random(1234))


@pytest.fixture
def session(dictionary):
    """Session with default settings and no round started."""
    return GameSession(dictionary)


@pytest.fixture
def hard_session(dictionary):
    return GameSession(dictionary, hard_mode=True)
