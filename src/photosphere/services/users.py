"""User-related business logic."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from photosphere.domain.errors import (
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidInputError,
)
from photosphere.domain.models import DEFAULT_ROLE, UserRecord
from photosphere.services.security import PasswordHasher

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user credentials."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def create_user(
        self, name: str, email: str, role: str, password_hash: str
    ) -> UserRecord:
        """Create and return a new user, raising DuplicateUserError if taken."""


def normalize_email(email: str | None) -> str:
    """Normalize an email for use as a lookup key."""
    return (email or "").strip().lower()


@dataclass
class UserService:
    """Application service for registration and login."""

    repository: UserRepository
    hasher: PasswordHasher = field(default_factory=PasswordHasher)

    def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        role: str | None = None,
    ) -> UserRecord:
        """Register a new user with a hashed password."""
        cleaned_name = (name or "").strip()
        cleaned_email = normalize_email(email)
        if not cleaned_name or not cleaned_email or not password:
            raise InvalidInputError("Name, email and password are required")
        cleaned_role = (role or "").strip().lower() or DEFAULT_ROLE
        if self.repository.get_by_email(cleaned_email) is not None:
            raise DuplicateUserError("User exists")

        user = self.repository.create_user(
            name=cleaned_name,
            email=cleaned_email,
            role=cleaned_role,
            password_hash=self.hasher.hash(password),
        )
        logger.info(
            "Registered user", extra={"user_id": str(user.id), "role": user.role}
        )
        return user

    def verify(self, email: str | None, password: str | None) -> UserRecord:
        """Return the user if the credentials match.

        Unknown emails and wrong passwords raise the same error so callers
        cannot probe which accounts exist.
        """
        cleaned_email = normalize_email(email)
        if not cleaned_email or not password:
            raise InvalidInputError("Email and password are required")
        user = self.repository.get_by_email(cleaned_email)
        stored_hash = user.password_hash if user is not None else None
        if not self.hasher.verify(password, stored_hash) or user is None:
            logger.warning("Rejected login attempt")
            raise InvalidCredentialsError("Invalid credentials")
        return user
