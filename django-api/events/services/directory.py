"""Demo user directory.

Credentials are a fixed list; there is no registration or password storage.
"""

from dataclasses import dataclass

from events.domain import Identity, Role


@dataclass(frozen=True)
class Credential:
    """A directory entry that can log in."""

    id: str
    name: str
    email: str
    password: str
    role: Role

    def to_identity(self) -> Identity:
        return Identity(id=self.id, name=self.name, email=self.email, role=self.role)


CREDENTIALS: tuple[Credential, ...] = (
    Credential(
        id="1",
        name="Admin User",
        email="admin@eventease.com",
        password="Admin@123",
        role=Role.ADMIN,
    ),
    Credential(
        id="2",
        name="John Doe",
        email="user@eventease.com",
        password="User@123",
        role=Role.USER,
    ),
)

# Everyone shown on the admin users page, including members without a login.
MEMBERS: tuple[Identity, ...] = tuple(c.to_identity() for c in CREDENTIALS) + (
    Identity(id="3", name="Jane Smith", email="jane.smith@example.com", role=Role.USER),
    Identity(id="4", name="Mike Johnson", email="mike.j@example.com", role=Role.USER),
)
