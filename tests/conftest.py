"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from ask.core import reset_registry


@pytest.fixture
def fresh_registry(monkeypatch):
    """Rebuild the global registry from settings around the test.

    Lets tests set ASK_* variables with monkeypatch before the first call.
    """
    reset_registry()
    yield
    reset_registry()


@dataclass
class Point:
    x: int = 0
    y: int = 0


@dataclass
class Profile:
    name: str = ""
    tags: list[str] = field(default_factory=list)
    origin: Point = field(default_factory=Point)
    nickname: str | None = None


@pytest.fixture
def point_cls():
    return Point


@pytest.fixture
def profile_cls():
    return Profile
