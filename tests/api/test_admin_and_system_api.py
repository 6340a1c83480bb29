"""HTTP tests for admin cancellation resumption and system endpoints."""

import pytest
from uuid_extensions import uuid7

from src.core.container import get_memory_store
from src.domain.enums.registration_status import RegistrationStatus
from tests.api.conftest import API, assert_problem, auth
from tests.conftest import create_event, create_registration

RESUME = f"{API}/admin/event-cancellations/resumptions"


@pytest.mark.api
class TestResumeEventCancellations:
    """POST /admin/event-cancellations/resumptions."""

    def test_admin_completes_pending_cascade(self, client, admin_headers):
        store = get_memory_store()
        pending = create_event()
        pending.begin_cancellation()
        store.events[pending.id] = pending
        registration = create_registration(event_id=pending.id)
        store.registrations[registration.id] = registration

        response = client.post(RESUME, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["completed_event_ids"] == [str(pending.id)]
        assert store.registrations[registration.id].status == RegistrationStatus.CANCELLED
        assert_problem(client.get(f"{API}/events/{pending.id}"), 410)

    def test_nothing_pending(self, client, admin_headers):
        response = client.post(RESUME, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["completed_event_ids"] == []

    def test_organizer_forbidden(self, client):
        response = client.post(RESUME, headers=auth(uuid7(), "organizer"))

        assert_problem(response, 403)


@pytest.mark.api
class TestSystemEndpoints:
    """GET /, /health, /config."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Eventdesk API"

    def test_health_memory_backend(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "storage": "memory"}

    def test_config_hidden_outside_development(self, client):
        response = client.get("/config")

        assert response.status_code == 403

    def test_trace_id_echoed(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "trace-abc"})

        assert response.headers["X-Trace-Id"] == "trace-abc"

    def test_unknown_route_is_problem_json(self, client):
        response = client.get(f"{API}/nowhere")

        assert_problem(response, 404)
