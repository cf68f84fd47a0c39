"""Domain models for users and authenticated identities."""

from dataclasses import dataclass
from uuid import UUID

CREATOR_ROLE = "creator"
DEFAULT_ROLE = "reader"


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered user."""

    id: UUID
    name: str
    email: str
    role: str
    password_hash: str


@dataclass(frozen=True)
class Identity:
    """Identity carried by a verified bearer token."""

    user_id: UUID
    name: str
    role: str

    @property
    def is_creator(self) -> bool:
        return self.role == CREATOR_ROLE
