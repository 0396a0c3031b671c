"""Session service - owns the authenticated identity of one client.

States are Unauthenticated (user is None) and Authenticated(identity).
Only the resolved identity is persisted, never the credential.
"""

import logging
from collections.abc import Callable, Iterable

from django.utils.crypto import constant_time_compare

from events.domain import Identity, Notification, Severity
from events.domain.errors import InvalidCredentialsError
from events.services.directory import CREDENTIALS, Credential
from events.signals import send_notification
from events.stores.codec import SnapshotDecodeError, dump_identity, load_identity
from events.stores.interfaces import ClientStorage

logger = logging.getLogger(__name__)

USER_KEY = "user"


class SessionService:
    """Service for login, logout and session rehydration."""

    def __init__(
        self,
        storage: ClientStorage,
        directory: Iterable[Credential] = CREDENTIALS,
        notifier: Callable[[Notification], None] = send_notification,
    ) -> None:
        self._storage = storage
        self._directory = tuple(directory)
        self._notify = notifier
        self._user: Identity | None = None
        self.is_loading = True
        self.rehydrate()

    @property
    def user(self) -> Identity | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.is_admin

    def rehydrate(self) -> Identity | None:
        """Restore a previously persisted identity.

        A corrupt record is removed and the session stays unauthenticated.
        """
        try:
            raw = self._storage.get_item(USER_KEY)
            if raw is None:
                return None
            try:
                self._user = load_identity(raw)
            except SnapshotDecodeError:
                logger.warning("Discarding unreadable saved user", exc_info=True)
                self._storage.remove_item(USER_KEY)
            return self._user
        finally:
            self.is_loading = False

    def login(self, email: str, password: str) -> Identity:
        """Authenticate against the credential directory.

        Raises:
            InvalidCredentialsError: If no entry matches both email and password.
        """
        self.is_loading = True
        try:
            credential = self._find(email, password)
            if credential is None:
                self._notify(
                    Notification(
                        title="Login Failed",
                        description="Invalid email or password",
                        severity=Severity.DESTRUCTIVE,
                    )
                )
                raise InvalidCredentialsError()

            identity = credential.to_identity()
            self._user = identity
            self._storage.set_item(USER_KEY, dump_identity(identity))
            logger.info("User %s logged in", identity.id)
            self._notify(
                Notification(
                    title="Login Successful",
                    description=f"Welcome back, {identity.name}!",
                )
            )
            return identity
        finally:
            self.is_loading = False

    def logout(self) -> None:
        """Clear the session. Always succeeds."""
        self._user = None
        self._storage.remove_item(USER_KEY)
        self._notify(
            Notification(
                title="Logged Out",
                description="You have been successfully logged out.",
            )
        )

    def _find(self, email: str, password: str) -> Credential | None:
        for credential in self._directory:
            if credential.email == email:
                if constant_time_compare(credential.password, password):
                    return credential
        return None
