"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from draftstate import ForkStore


@dataclass
class FixtureProfile:
    name: str
    age: int
    tags: list[str] = field(default_factory=list)


@pytest.fixture
def profile():
    """Fresh profile with a mutable list attribute."""
    return FixtureProfile(name="Chris", age=34, tags=["admin"])


@pytest.fixture
def profile_cls():
    return FixtureProfile


@pytest.fixture
def store():
    """Fresh, non-shared fork store."""
    return ForkStore()
