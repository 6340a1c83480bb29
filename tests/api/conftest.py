"""Fixtures for HTTP tests.

The app runs with the in-memory storage backend (see tests/conftest.py).
Access tokens are signed with the test secret, the same way the fronting
identity service would sign them.
"""

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.config import settings
from src.main import app

API = settings.api_v1_prefix


def make_token(user_id: UUID, *roles: str, expires_in: timedelta = timedelta(minutes=15)) -> str:
    claims: dict[str, Any] = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + expires_in,
    }
    if roles:
        claims["roles"] = list(roles)
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def auth(user_id: UUID, *roles: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, *roles)}"}


def event_payload(**overrides: Any) -> dict[str, Any]:
    """JSON body for POST/PUT /events."""
    start = datetime.now(UTC) + timedelta(days=14)
    payload: dict[str, Any] = {
        "title": "Python Meetup",
        "description": "Monthly community meetup",
        "category": "workshop",
        "start_at": start.isoformat(),
        "end_at": (start + timedelta(hours=2)).isoformat(),
        "location": {
            "type": "online",
            "virtual_link": "https://meet.example.com/py",
        },
        "capacity": 2,
        "registration_deadline": (start - timedelta(days=1)).isoformat(),
        "tags": ["python"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def organizer_id() -> UUID:
    return uuid7()


@pytest.fixture
def organizer_headers(organizer_id) -> dict[str, str]:
    return auth(organizer_id, "organizer")


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth(uuid7(), "admin")


@pytest.fixture
def create_event_via_api(
    client, organizer_headers
) -> Callable[..., dict[str, Any]]:
    """Create an event through the API and return its JSON body."""

    def _create(**overrides: Any) -> dict[str, Any]:
        response = client.post(
            f"{API}/events", json=event_payload(**overrides), headers=organizer_headers
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


def assert_problem(response, status: int, code: str | None = None) -> dict[str, Any]:
    """Assert an RFC 7807 body and return it."""
    assert response.status_code == status, response.text
    assert response.headers["content-type"].startswith("application/")
    body = response.json()
    assert body["status"] == status
    assert body["title"]
    assert body["type"].startswith(settings.api_base_url)
    assert response.headers.get("X-Trace-Id")
    if code is not None:
        assert body["code"] == code
    return body
