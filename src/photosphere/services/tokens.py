"""Signed bearer tokens for authenticated sessions."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from photosphere.domain.errors import InvalidTokenError
from photosphere.domain.models import Identity, UserRecord

_JWT_ALG = "HS256"
_REQUIRED_CLAIMS = ["sub", "name", "role", "iat", "exp"]


@dataclass
class TokenService:
    """Issue and verify time-limited HS256 tokens."""

    secret: str
    ttl_minutes: int = 120

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("jwt_secret_blank")

    def issue(self, user: UserRecord) -> str:
        """Return a signed token carrying the user's id, name and role."""
        now = datetime.now(tz=UTC)
        payload: dict[str, object] = {
            "sub": str(user.id),
            "name": user.name,
            "role": user.role,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self.ttl_minutes)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=_JWT_ALG)

    def verify(self, token: str) -> Identity:
        """Decode a token, raising InvalidTokenError if it cannot be trusted."""
        if not token:
            raise InvalidTokenError("Missing token")
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[_JWT_ALG],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid token") from exc

        try:
            user_id = UUID(str(payload["sub"]))
        except ValueError as exc:
            raise InvalidTokenError("Invalid token subject") from exc
        return Identity(
            user_id=user_id,
            name=str(payload["name"]),
            role=str(payload["role"]),
        )
