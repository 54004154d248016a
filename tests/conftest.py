"""Shared test fixtures — file-backed SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - The app sees the test store through app.state.db, exactly like production
    - dependency_overrides and app.state are restored after each test

Design Decisions:
    - SQLite file over :memory:: every pooled connection must see the same tables
    - Lifespan not run by ASGITransport: the fixture plays its part (manager + tables)
"""

import os

# Human-readable log lines when a test drives the lifespan
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from portfolio_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from portfolio_api.main import app  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'portfolio_test.db'}",
    )
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
async def client(db_manager):
    """FastAPI test client wired to the test store."""
    app.state.db = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    del app.state.db


@pytest.fixture
def project_payload():
    return {
        "title": "X",
        "description": "Y",
        "image_url": None,
        "project_url": None,
        "tags": "a,b",
    }


@pytest.fixture
def about_payload():
    return {
        "name": "Ada Lovelace",
        "title": "Analyst",
        "bio": "Writes programs for engines that do not exist yet.",
        "image_url": "https://example.com/ada.png",
        "email": "ada@example.com",
        "phone": "+44 20 0000 0000",
        "location": "London",
    }


@pytest.fixture
def message_payload():
    return {
        "name": "Grace",
        "email": "grace@example.com",
        "subject": "Hello",
        "message": "Found a moth in the relay.",
    }


@pytest.fixture
def experience_payload():
    return {
        "company": "Acme",
        "position": "Engineer",
        "description": "Built things.",
        "start_date": "2020-01-15",
        "end_date": "2022-06-30",
        "is_current": False,
    }
