"""Pytest configuration and fixtures."""

import os

import pytest

from correlationvector.engine import CorrelationVectorEngine
from correlationvector.settings import CorrelationVectorSettings
from tests.helpers.deterministic import FIXED_NOW_NS, FixedClock, SequenceRandomSource


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove CORRELATION_VECTOR_* variables so settings use their defaults."""
    for key in list(os.environ):
        if key.startswith("CORRELATION_VECTOR_"):
            monkeypatch.delenv(key)


@pytest.fixture
def random_source():
    """Random source producing bytes 0, 1, 2, ... 255, 0, 1, ..."""
    return SequenceRandomSource(bytes(range(256)))


@pytest.fixture
def fixed_clock():
    return FixedClock(FIXED_NOW_NS)


@pytest.fixture
def engine(random_source, fixed_clock):
    """Lenient engine with deterministic randomness and time."""
    return CorrelationVectorEngine(
        settings=CorrelationVectorSettings(),
        random_source=random_source,
        clock=fixed_clock,
    )


@pytest.fixture
def strict_engine(random_source, fixed_clock):
    """Engine with strict validation of inbound vectors."""
    return CorrelationVectorEngine(
        settings=CorrelationVectorSettings(validate_during_creation=True),
        random_source=random_source,
        clock=fixed_clock,
    )
