"""
Pytest configuration and shared fixtures

Fun fact: Files named conftest.py are discovered automatically by pytest, and
their fixtures are available to every test in the same directory and below!
"""

import random

import pytest

from betterguid.generator import Generator
from betterguid.kernel.settings import GeneratorSettings
from betterguid.kernel.time import TestClock
from tests.helpers import FIXED_MS


@pytest.fixture
def test_clock() -> TestClock:
    """Provide a controllable clock frozen at FIXED_MS"""
    return TestClock(FIXED_MS)


@pytest.fixture
def settings() -> GeneratorSettings:
    """Seeded settings with metrics off so tests don't touch global counters"""
    return GeneratorSettings(seed=42, metrics_enabled=False)


@pytest.fixture
def seeded_generator(settings: GeneratorSettings, test_clock: TestClock) -> Generator:
    """Provide a generator with a fixed seed and a frozen clock"""
    return Generator(settings, clock=test_clock)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
