"""In-memory user repository."""

import threading
from dataclasses import dataclass, field
from uuid import uuid4

from photosphere.domain.errors import DuplicateUserError
from photosphere.domain.models import UserRecord
from photosphere.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Process-local user storage keyed by normalized email."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""
        with self._lock:
            return self.users.get(email)

    def create_user(
        self, name: str, email: str, role: str, password_hash: str
    ) -> UserRecord:
        """Create a new user, rejecting emails that are already registered."""
        with self._lock:
            if email in self.users:
                raise DuplicateUserError("User exists")
            user = UserRecord(
                id=uuid4(),
                name=name,
                email=email,
                role=role,
                password_hash=password_hash,
            )
            self.users[email] = user
            return user
