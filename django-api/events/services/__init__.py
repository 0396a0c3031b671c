from events.services.catalog_service import CatalogService
from events.services.session_service import SessionService

__all__ = ["CatalogService", "SessionService"]
