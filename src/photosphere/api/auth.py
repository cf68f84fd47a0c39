"""Bearer-token request authentication."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Depends, Header, Request

from photosphere.domain.errors import (
    ForbiddenError,
    InvalidTokenError,
    UnauthorizedError,
)
from photosphere.domain.models import Identity

if TYPE_CHECKING:
    from photosphere.containers import AppContainer

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: str) -> str | None:
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def require_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Identity:
    """Verify the bearer token and attach its identity to the request."""
    if not authorization:
        raise UnauthorizedError("Missing authorization header")
    token = _extract_bearer_token(authorization)
    if token is None:
        raise ForbiddenError("Malformed authorization header")

    container: AppContainer = request.app.state.container
    try:
        identity = container.token_service.verify(token)
    except InvalidTokenError as exc:
        logger.info("Rejected bearer token: %s", exc.message)
        raise ForbiddenError(exc.message) from exc

    request.state.identity = identity
    return identity


async def require_creator(identity: Identity = Depends(require_identity)) -> Identity:
    """Ensure the authenticated identity holds the creator role."""
    if not identity.is_creator:
        raise ForbiddenError("Only creators can upload photos")
    return identity
