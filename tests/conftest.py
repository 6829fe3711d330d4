"""Pytest fixtures for all tests."""

import random

import pytest
from httpx import AsyncClient, ASGITransport

from api.app import create_app
from config import Config, UIDConfig
from uid.generator import MonotonicGenerator

# 2023-11-14T22:13:20.000Z
FIXED_MILLIS = 1_700_000_000_000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now=FIXED_MILLIS):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, millis=1):
        self.now += millis


@pytest.fixture
def clock():
    """Create a fixed test clock."""
    return FakeClock()


@pytest.fixture
def seeded_choice():
    """Reproducible symbol picker."""
    return random.Random(1234).choice


@pytest.fixture
def generator(clock, seeded_choice):
    """Create a generator on the fake clock."""
    return MonotonicGenerator(UIDConfig(), clock=clock, choice=seeded_choice)


@pytest.fixture
def binary_config():
    """Tiny alphabet so overflow and prefix carries are reachable."""
    return UIDConfig(alphabet="01", time_length=2, random_length=2, max_time=3)


@pytest.fixture
def max_choice():
    """Symbol picker that always returns the maximum symbol."""
    return lambda symbols: symbols[-1]


@pytest.fixture
async def client(clock):
    """Create async test client on the fake clock."""
    app = create_app(Config(), clock=clock)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
