"""Shared fixtures for Document Service tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from document_service.config.settings import Settings
from document_service.core.document_store import DocumentStore
from document_service.main import create_app


class FakeClock:
    """Clock that advances one second on every reading."""

    def __init__(self, start=None):
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    """Empty store with a deterministic clock."""
    return DocumentStore(seed=False, clock=clock)


@pytest.fixture
def seeded_store(clock):
    return DocumentStore(seed=True, clock=clock)


@pytest.fixture
def client(store):
    """Test client serving the empty store."""
    app = create_app(settings=Settings(seed_sample_data=False), store=store)
    with TestClient(app) as test_client:
        yield test_client
