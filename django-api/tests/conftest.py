"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from events.services import CatalogService, SessionService
from events.stores import InMemoryClientStorage


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def storage() -> InMemoryClientStorage:
    return InMemoryClientStorage()


@pytest.fixture
def notifications() -> list:
    return []


@pytest.fixture
def catalog(storage, notifications) -> CatalogService:
    return CatalogService(storage, notifier=notifications.append)


@pytest.fixture
def session(storage, notifications) -> SessionService:
    return SessionService(storage, notifier=notifications.append)


def _login(client: APIClient, email: str, password: str) -> APIClient:
    response = client.post(
        "/api/session", {"email": email, "password": password}, format="json"
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_client(api_client: APIClient) -> APIClient:
    return _login(api_client, "admin@eventease.com", "Admin@123")


@pytest.fixture
def user_client(api_client: APIClient) -> APIClient:
    return _login(api_client, "user@eventease.com", "User@123")


@pytest.fixture
def event_payload() -> dict:
    return {
        "name": "Pottery for Beginners",
        "description": "Hands-on introduction to wheel throwing and glazing techniques.",
        "category": "art",
        "date": "2025-11-20",
        "time": "06:30 PM",
        "location": "Clay Studio, Portland",
        "organizer_name": "Portland Makers",
        "price": "35.00",
        "image": "https://example.com/pottery.jpg",
    }
