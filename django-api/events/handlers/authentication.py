"""DRF authentication and permissions backed by the session service."""

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, CSRFCheck
from rest_framework.permissions import BasePermission

from events.domain import Identity
from events.handlers.dependencies import get_session_service


class SessionUser:
    """Adapter exposing an Identity as a DRF request.user."""

    is_authenticated = True

    def __init__(self, identity: Identity) -> None:
        self.identity = identity

    @property
    def is_admin(self) -> bool:
        return self.identity.is_admin

    def __str__(self) -> str:
        return self.identity.email


class IdentitySessionAuthentication(BaseAuthentication):
    """Authenticate requests from the identity stored in the client session.

    The identity rides on the session cookie, so unsafe methods from an
    authenticated client must carry a valid CSRF token.
    """

    def authenticate(self, request):
        service = get_session_service(request)
        if service.user is None:
            return None
        self.enforce_csrf(request)
        return (SessionUser(service.user), None)

    def enforce_csrf(self, request) -> None:
        def dummy_get_response(request):
            return None

        check = CSRFCheck(dummy_get_response)
        check.process_request(request)
        reason = check.process_view(request, None, (), {})
        if reason:
            raise exceptions.PermissionDenied(f"CSRF Failed: {reason}")

    def authenticate_header(self, request) -> str:
        return "Session"


class IsAdmin(BasePermission):
    """Allow only authenticated admins."""

    def has_permission(self, request, view) -> bool:
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_admin", False))
