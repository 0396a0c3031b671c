"""Per-request construction of services.

Each request gets its own service instances; they are built on first use and
reused for the rest of the request.
"""

from django.conf import settings
from django.http import HttpRequest
from rest_framework.permissions import SAFE_METHODS

from events.services import CatalogService, SessionService
from events.stores.django_store import DjangoClientStorage, SessionClientStorage


def _http_request(request) -> HttpRequest:
    return getattr(request, "_request", request)


def get_session_service(request) -> SessionService:
    http_request = _http_request(request)
    service = getattr(http_request, "eventease_session", None)
    if service is None:
        service = SessionService(SessionClientStorage(http_request.session))
        http_request.eventease_session = service
    return service


def get_catalog_service(request) -> CatalogService:
    http_request = _http_request(request)
    service = getattr(http_request, "eventease_catalog", None)
    if service is None:
        storage = DjangoClientStorage(
            scope=settings.EVENTEASE["CATALOG_SCOPE"],
            for_update=http_request.method not in SAFE_METHODS,
        )
        service = CatalogService(storage, seed=settings.EVENTEASE["SEED_DEMO_DATA"])
        http_request.eventease_catalog = service
    return service
