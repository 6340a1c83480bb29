"""HTTP tests for /api/v1/events and /api/v1/organizers/{id}/events."""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.core.container import get_memory_store
from src.domain.enums.event_status import EventStatus
from tests.api.conftest import API, assert_problem, auth, event_payload, make_token
from tests.conftest import create_event


@pytest.mark.api
class TestCreateEvent:
    """POST /events."""

    def test_organizer_creates_published_event(self, client, organizer_id, organizer_headers):
        response = client.post(
            f"{API}/events", json=event_payload(), headers=organizer_headers
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "published"
        assert body["organizer_id"] == str(organizer_id)
        assert body["registered_count"] == 0
        assert body["location"]["type"] == "online"

    def test_attendee_forbidden(self, client):
        response = client.post(
            f"{API}/events", json=event_payload(), headers=auth(uuid7())
        )

        assert_problem(response, 403)

    def test_missing_token_unauthorized(self, client):
        response = client.post(f"{API}/events", json=event_payload())

        assert_problem(response, 401)
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_expired_token_unauthorized(self, client):
        token = make_token(uuid7(), "organizer", expires_in=timedelta(minutes=-1))

        response = client.post(
            f"{API}/events",
            json=event_payload(),
            headers={"Authorization": f"Bearer {token}"},
        )

        assert_problem(response, 401)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": "   "},
            {"capacity": 0},
            {"location": {"type": "physical", "address": "1 Main St"}},
            {"location": {"type": "online"}},
            {"start_at": (datetime.now(UTC) - timedelta(days=1)).isoformat()},
        ],
    )
    def test_invalid_body_rejected(self, client, organizer_headers, overrides):
        response = client.post(
            f"{API}/events", json=event_payload(**overrides), headers=organizer_headers
        )

        body = assert_problem(response, 422)
        assert body["errors"]

    def test_end_before_start_rejected(self, client, organizer_headers):
        start = datetime.now(UTC) + timedelta(days=3)
        response = client.post(
            f"{API}/events",
            json=event_payload(
                start_at=start.isoformat(),
                end_at=(start - timedelta(hours=1)).isoformat(),
            ),
            headers=organizer_headers,
        )

        assert_problem(response, 422)


@pytest.mark.api
class TestReadEvents:
    """GET /events, /events/{id}, /events/categories, /organizers/{id}/events."""

    def test_get_event_is_public(self, client, create_event_via_api):
        created = create_event_via_api()

        response = client.get(f"{API}/events/{created['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_unknown_event_not_found(self, client):
        response = client.get(f"{API}/events/{uuid7()}")

        assert_problem(response, 404, "event_not_found")

    def test_malformed_id_rejected(self, client):
        response = client.get(f"{API}/events/not-a-uuid")

        assert_problem(response, 422)

    def test_list_paginates(self, client, create_event_via_api):
        for index in range(3):
            create_event_via_api(title=f"Event {index}")

        response = client.get(f"{API}/events", params={"page": 2, "size": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body["events"]) == 1
        assert body["meta"]["total_count"] == 3
        assert body["meta"]["total_pages"] == 2
        assert body["meta"]["page"] == 2

    def test_list_invalid_page(self, client):
        response = client.get(f"{API}/events", params={"page": 0})

        assert_problem(response, 400, "invalid_page")

    def test_categories(self, client):
        response = client.get(f"{API}/events/categories")

        assert response.status_code == 200
        assert "workshop" in response.json()["categories"]

    def test_organizer_events(self, client, organizer_id, create_event_via_api):
        created = create_event_via_api()
        other = create_event()
        get_memory_store().events[other.id] = other

        response = client.get(f"{API}/organizers/{organizer_id}/events")

        assert response.status_code == 200
        assert [e["id"] for e in response.json()["events"]] == [created["id"]]

    def test_organizer_events_hide_cancelled(
        self, client, organizer_id, organizer_headers, create_event_via_api
    ):
        kept = create_event_via_api(title="Kept")
        dropped = create_event_via_api(title="Dropped")
        client.delete(f"{API}/events/{dropped['id']}", headers=organizer_headers)

        response = client.get(f"{API}/organizers/{organizer_id}/events")

        assert response.status_code == 200
        assert [e["id"] for e in response.json()["events"]] == [kept["id"]]
        assert response.json()["meta"]["total_count"] == 1


@pytest.mark.api
class TestMutateEvent:
    """PUT, PATCH status, DELETE."""

    def test_owner_updates(self, client, organizer_headers, create_event_via_api):
        created = create_event_via_api()

        response = client.put(
            f"{API}/events/{created['id']}",
            json=event_payload(title="Renamed", capacity=10),
            headers=organizer_headers,
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Renamed"
        assert response.json()["capacity"] == 10

    def test_other_organizer_forbidden(self, client, create_event_via_api):
        created = create_event_via_api()

        response = client.put(
            f"{API}/events/{created['id']}",
            json=event_payload(),
            headers=auth(uuid7(), "organizer"),
        )

        assert_problem(response, 403, "permission_denied")

    def test_admin_may_update_any_event(self, client, admin_headers, create_event_via_api):
        created = create_event_via_api()

        response = client.put(
            f"{API}/events/{created['id']}",
            json=event_payload(title="By admin"),
            headers=admin_headers,
        )

        assert response.status_code == 200

    def test_update_unknown_event_not_found(self, client, admin_headers):
        response = client.put(
            f"{API}/events/{uuid7()}", json=event_payload(), headers=admin_headers
        )

        assert_problem(response, 404)

    def test_status_back_to_draft_conflict(
        self, client, organizer_headers, create_event_via_api
    ):
        created = create_event_via_api()

        response = client.patch(
            f"{API}/events/{created['id']}/status",
            json={"status": "draft"},
            headers=organizer_headers,
        )

        assert_problem(response, 409, "invalid_status_transition")

    def test_draft_published_via_status(self, client, organizer_id, organizer_headers):
        draft = create_event(organizer_id=organizer_id, status=EventStatus.DRAFT)
        get_memory_store().events[draft.id] = draft

        response = client.patch(
            f"{API}/events/{draft.id}/status",
            json={"status": "published"},
            headers=organizer_headers,
        )

        assert response.status_code == 200
        assert response.json()["status"] == "published"

    def test_delete_cancels_and_hides(
        self, client, organizer_headers, create_event_via_api
    ):
        created = create_event_via_api()

        deleted = client.delete(f"{API}/events/{created['id']}", headers=organizer_headers)
        again = client.delete(f"{API}/events/{created['id']}", headers=organizer_headers)
        fetched = client.get(f"{API}/events/{created['id']}")
        listed = client.get(f"{API}/events")
        updated = client.put(
            f"{API}/events/{created['id']}",
            json=event_payload(),
            headers=organizer_headers,
        )

        assert deleted.status_code == 200
        assert deleted.json()["status"] == "cancelled"
        assert again.status_code == 200
        assert again.json()["cancelled_registrations"] == 0
        assert_problem(fetched, 410, "event_cancelled")
        assert listed.json()["events"] == []
        assert_problem(updated, 410)

    def test_delete_requires_token(self, client, create_event_via_api):
        created = create_event_via_api()

        response = client.delete(f"{API}/events/{created['id']}")

        assert_problem(response, 401)
