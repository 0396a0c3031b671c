"""Integration tests for the EventEase HTTP API.

Run with: pytest tests/test_event_catalog.py -v
"""

import pytest
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestSession:
    """Tests for /api/session"""

    def test_anonymous_has_no_user(self, api_client: APIClient):
        response = api_client.get("/api/session")
        assert response.status_code == 200
        assert response.json() == {"user": None}

    def test_login_returns_identity_without_password(self, api_client: APIClient):
        response = api_client.post(
            "/api/session",
            {"email": "admin@eventease.com", "password": "Admin@123"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["user"] == {
            "id": "1",
            "name": "Admin User",
            "email": "admin@eventease.com",
            "role": "admin",
        }

    def test_session_survives_between_requests(self, user_client: APIClient):
        response = user_client.get("/api/session")
        assert response.json()["user"]["email"] == "user@eventease.com"

    def test_invalid_credentials(self, api_client: APIClient):
        response = api_client.post(
            "/api/session",
            {"email": "admin@eventease.com", "password": "wrong"},
            format="json",
        )
        assert response.status_code == 401
        assert response.json() == {
            "code": "INVALID_CREDENTIALS",
            "message": "Invalid email or password",
        }
        assert api_client.get("/api/session").json() == {"user": None}

    def test_failed_login_keeps_existing_session(self, admin_client: APIClient):
        admin_client.post(
            "/api/session",
            {"email": "admin@eventease.com", "password": "wrong"},
            format="json",
        )
        assert admin_client.get("/api/session").json()["user"]["role"] == "admin"

    def test_missing_fields_rejected(self, api_client: APIClient):
        response = api_client.post("/api/session", {"email": "x"}, format="json")
        assert response.status_code == 400

    def test_logout(self, user_client: APIClient):
        assert user_client.delete("/api/session").status_code == 204
        assert user_client.get("/api/session").json() == {"user": None}
        assert user_client.get("/api/me/bookings").status_code == 401


@pytest.mark.django_db
class TestEventList:
    """Tests for /api/events"""

    def test_list_events_returns_seed_catalog(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        data = response.json()
        assert [e["id"] for e in data] == ["1", "2", "3", "4", "5", "6"]
        assert data[0]["price"] == "149.99"
        assert data[0]["category_label"] == "Technology"
        assert data[0]["organizer_name"] == "Tech Innovators Association"

    def test_list_events_filters(self, api_client: APIClient):
        response = api_client.get("/api/events", {"category": "music"})
        assert [e["id"] for e in response.json()] == ["2"]
        response = api_client.get("/api/events", {"search": "seattle"})
        assert [e["id"] for e in response.json()] == ["6"]
        response = api_client.get("/api/events", {"sortBy": "price-asc"})
        assert [e["id"] for e in response.json()][0] == "5"

    def test_featured(self, api_client: APIClient):
        response = api_client.get("/api/events/featured")
        assert [e["id"] for e in response.json()] == ["1", "3"]

    def test_create_event_as_admin(self, admin_client: APIClient, event_payload):
        response = admin_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 201
        body = response.json()
        assert body["id"] not in {"1", "2", "3", "4", "5", "6"}
        assert body["featured"] is False
        assert admin_client.get(f"/api/events/{body['id']}").json()["name"] == "Pottery for Beginners"

    def test_create_event_validates_input(self, admin_client: APIClient, event_payload):
        event_payload.update(name="Hi", price="-5", category="sports")
        response = admin_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 400
        assert set(response.json()) == {"name", "price", "category"}

    def test_create_event_requires_login(self, api_client: APIClient, event_payload):
        response = api_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 401

    def test_create_event_requires_admin(self, user_client: APIClient, event_payload):
        response = user_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 403


@pytest.mark.django_db
class TestEventDetail:
    """Tests for /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        response = api_client.get("/api/events/1")
        assert response.status_code == 200
        assert response.json()["name"] == "Tech Summit 2025"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/missing")
        assert response.status_code == 404
        assert response.json() == {"code": "EVENT_NOT_FOUND", "message": "Event not found."}

    def test_partial_update(self, admin_client: APIClient):
        response = admin_client.patch("/api/events/2", {"price": "59.00"}, format="json")
        assert response.status_code == 200
        body = response.json()
        assert body["price"] == "59.00"
        assert body["name"] == "Music Festival Weekend"
        assert body["featured"] is False

    def test_update_missing_event(self, admin_client: APIClient):
        response = admin_client.patch("/api/events/missing", {"time": "10:00 AM"}, format="json")
        assert response.status_code == 404

    def test_delete_cascades_bookings(self, admin_client: APIClient):
        assert admin_client.delete("/api/events/1").status_code == 204
        assert admin_client.get("/api/events/1").status_code == 404
        bookings = admin_client.get("/api/bookings").json()["results"]
        assert [b["id"] for b in bookings] == ["2"]

    def test_delete_requires_admin(self, user_client: APIClient):
        assert user_client.delete("/api/events/1").status_code == 403


@pytest.mark.django_db
class TestBooking:
    """Tests for booking endpoints."""

    def test_book_event(self, user_client: APIClient):
        response = user_client.post("/api/events/2/bookings")
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "confirmed"
        assert body["user_id"] == "2"
        assert body["user_email"] == "user@eventease.com"

    def test_book_event_twice(self, user_client: APIClient):
        user_client.post("/api/events/2/bookings")
        response = user_client.post("/api/events/2/bookings")
        assert response.status_code == 409
        assert response.json()["code"] == "ALREADY_BOOKED"

    def test_book_missing_event(self, user_client: APIClient):
        response = user_client.post("/api/events/missing/bookings")
        assert response.status_code == 404

    def test_booking_requires_login(self, api_client: APIClient):
        assert api_client.post("/api/events/2/bookings").status_code == 401

    def test_my_bookings_split(self, user_client: APIClient):
        response = user_client.get("/api/me/bookings")
        assert response.status_code == 200
        body = response.json()
        assert [b["event_name"] for b in body["upcoming"]] == ["Tech Summit 2025", "Startup Workshop"]
        assert body["past"] == []

    def test_event_bookings_for_admin(self, admin_client: APIClient):
        response = admin_client.get("/api/events/3/bookings")
        assert [b["id"] for b in response.json()] == ["2"]
        assert admin_client.get("/api/events/missing/bookings").status_code == 404

    def test_update_booking_status(self, admin_client: APIClient):
        response = admin_client.patch("/api/bookings/1", {"status": "cancelled"}, format="json")
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        counts = admin_client.get("/api/bookings").json()["counts"]
        assert counts["cancelled"] == 1
        assert counts["upcoming"] == 0

    def test_update_booking_status_validation(self, admin_client: APIClient):
        response = admin_client.patch("/api/bookings/1", {"status": "pending"}, format="json")
        assert response.status_code == 400
        response = admin_client.patch("/api/bookings/missing", {"status": "attended"}, format="json")
        assert response.status_code == 404

    def test_booking_search(self, admin_client: APIClient):
        response = admin_client.get("/api/bookings", {"search": "startup"})
        assert [b["event_name"] for b in response.json()["results"]] == ["Startup Workshop"]


@pytest.mark.django_db
class TestAdmin:
    """Tests for admin dashboard and users."""

    def test_dashboard(self, admin_client: APIClient):
        response = admin_client.get("/api/admin/dashboard")
        assert response.status_code == 200
        body = response.json()
        assert body["total_events"] == 6
        assert body["total_bookings"] == 2
        assert body["top_events"][0] == {"name": "Tech Summit 2025", "bookings": 1}
        assert body["bookings_by_category"]["Workshop"] == 1

    def test_users_with_booking_counts(self, admin_client: APIClient):
        response = admin_client.get("/api/admin/users")
        counts = {u["email"]: u["booking_count"] for u in response.json()}
        assert counts["user@eventease.com"] == 2
        assert counts["jane.smith@example.com"] == 0

    def test_users_search(self, admin_client: APIClient):
        response = admin_client.get("/api/admin/users", {"search": "jane"})
        assert [u["id"] for u in response.json()] == ["3"]

    def test_dashboard_forbidden_for_users(self, user_client: APIClient):
        assert user_client.get("/api/admin/dashboard").status_code == 403


@pytest.mark.django_db
class TestCsrf:
    """Unsafe requests from a signed-in client need a CSRF token."""

    @pytest.fixture
    def csrf_client(self) -> APIClient:
        client = APIClient(enforce_csrf_checks=True)
        response = client.post(
            "/api/session",
            {"email": "admin@eventease.com", "password": "Admin@123"},
            format="json",
        )
        assert response.status_code == 200
        return client

    def test_login_sets_csrf_cookie(self, csrf_client: APIClient):
        assert csrf_client.cookies["csrftoken"].value

    def test_delete_without_token_rejected(self, csrf_client: APIClient):
        response = csrf_client.delete("/api/events/1")
        assert response.status_code == 403
        assert csrf_client.get("/api/events/1").status_code == 200

    def test_patch_without_token_rejected(self, csrf_client: APIClient):
        response = csrf_client.patch("/api/bookings/1", {"status": "cancelled"}, format="json")
        assert response.status_code == 403

    def test_delete_with_token_allowed(self, csrf_client: APIClient):
        token = csrf_client.cookies["csrftoken"].value
        response = csrf_client.delete("/api/events/1", HTTP_X_CSRFTOKEN=token)
        assert response.status_code == 204

    def test_anonymous_reads_need_no_token(self):
        client = APIClient(enforce_csrf_checks=True)
        assert client.get("/api/events").status_code == 200
