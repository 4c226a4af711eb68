# tests/conftest.py
"""
Pytest fixtures for the Ticket API test suite.

Each test gets its own TicketStore; the FastAPI client is wired to it
through a dependency override so tests never share state.
"""

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_store
from app.main import app
from app.models import TicketDraft
from app.store import TicketStore


@pytest.fixture
def store():
    return TicketStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def draft():
    return TicketDraft(title="Fix bug", description="Fix the critical bug")
