"""
Basic test configuration and fixtures.

Every test gets its own store pinned to a fixed clock: Monday
2026-10-19 10:00 UTC, so the week window starts on Sunday 2026-10-18.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from neudebri.core.config import Settings
from neudebri.main import create_app
from neudebri.services import HospitalStore, StatsService, StorageService

FIXED_NOW = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def store():
    """Seeded store fixture."""
    return HospitalStore(clock=fixed_clock)


@pytest.fixture
def empty_store():
    """Unseeded store fixture."""
    return HospitalStore(clock=fixed_clock, seed=False)


@pytest.fixture
def storage(store):
    return StorageService(store)


@pytest.fixture
def stats(storage):
    return StatsService(storage)


@pytest.fixture
def settings():
    """Settings fixture for testing."""
    return Settings()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """Test client fixture."""
    return TestClient(app)
