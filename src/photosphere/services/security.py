"""Password hashing for stored credentials."""

from dataclasses import dataclass, field

from passlib.context import CryptContext


def _default_context() -> CryptContext:
    return CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


@dataclass
class PasswordHasher:
    """Salted one-way hashing backed by a passlib context."""

    context: CryptContext = field(default_factory=_default_context)

    def hash(self, password: str) -> str:
        """Return a salted hash for a non-empty password."""
        if not password:
            raise ValueError("password_blank")
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Return whether the password matches the stored hash.

        Without a stored hash the context still runs a dummy verification,
        so a missing account costs as much as a wrong password.
        """
        if password_hash is None:
            self.context.dummy_verify()
            return False
        try:
            return self.context.verify(password, password_hash)
        except ValueError:
            return False
