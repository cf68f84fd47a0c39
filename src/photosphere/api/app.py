"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from photosphere.api.auth import require_creator, require_identity
from photosphere.api.schemas import (
    CommentRequest,
    CommentResponse,
    HealthResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PhotoResponse,
    RegisterRequest,
    ShareResponse,
)
from photosphere.app_logging import configure_logging
from photosphere.config import parse_cors_origins
from photosphere.containers import AppContainer
from photosphere.domain.errors import (
    ForbiddenError,
    InvalidCredentialsError,
    InvalidInputError,
    InvalidTokenError,
    NotFoundError,
    PhotoSphereError,
    UnauthorizedError,
)
from photosphere.domain.models import Identity

_STATUS_CODES: dict[type[PhotoSphereError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    InvalidTokenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_code_for(exc: PhotoSphereError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_type, code in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "PhotoSphere API starting",
            extra={"environment": container.settings.environment},
        )
        yield
        logger.info("PhotoSphere API shutting down")

    app = FastAPI(title="PhotoSphere", lifespan=lifespan)
    app.state.container = container
    app.state.started_at = time.monotonic()

    cors_origins = parse_cors_origins(container.settings.cors_allow_origins)
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type", "Authorization"],
        )

    @app.exception_handler(PhotoSphereError)
    async def handle_domain_error(
        request: Request, exc: PhotoSphereError
    ) -> JSONResponse:
        status_code = status_code_for(exc)
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if isinstance(exc, UnauthorizedError)
            else None
        )
        return JSONResponse(
            status_code=status_code, content={"error": exc.message}, headers=headers
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected request body", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    @app.get("/api/health")
    async def health(request: Request) -> HealthResponse:
        """Report liveness and seconds since startup."""
        uptime = time.monotonic() - request.app.state.started_at
        return HealthResponse(status="ok", uptime=round(uptime, 3))

    @app.post("/api/register")
    def register(payload: RegisterRequest, request: Request) -> MessageResponse:
        """Create a new account."""
        state_container: AppContainer = request.app.state.container
        state_container.user_service.register(
            name=payload.name,
            email=payload.email,
            password=payload.password,
            role=payload.role,
        )
        return MessageResponse(message="Registered")

    @app.post("/api/login")
    def login(payload: LoginRequest, request: Request) -> LoginResponse:
        """Exchange credentials for a bearer token."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.verify(payload.email, payload.password)
        token = state_container.token_service.issue(user)
        return LoginResponse(token=token, role=user.role)

    @app.get("/api/photos")
    async def list_photos(request: Request) -> list[PhotoResponse]:
        """Return the feed, most recent first."""
        state_container: AppContainer = request.app.state.container
        return [
            PhotoResponse.from_domain(photo)
            for photo in state_container.photo_service.list_feed()
        ]

    @app.post("/api/photos")
    async def upload_photo(
        request: Request,
        identity: Identity = Depends(require_creator),
        title: str | None = Form(default=None),
        image: UploadFile | None = File(default=None),
    ) -> PhotoResponse:
        """Publish a photo from a multipart upload."""
        state_container: AppContainer = request.app.state.container
        read_limit = state_container.settings.max_upload_bytes + 1
        image_bytes = await image.read(read_limit) if image is not None else None
        photo = state_container.photo_service.upload(
            identity=identity,
            title=title,
            image_bytes=image_bytes,
            mime_type=image.content_type if image is not None else None,
        )
        return PhotoResponse.from_domain(photo)

    @app.post(
        "/api/photos/{photo_id}/react/{reaction_type}",
        dependencies=[Depends(require_identity)],
    )
    async def react(
        photo_id: str, reaction_type: str, request: Request
    ) -> dict[str, int]:
        """Increment a reaction counter on a photo."""
        state_container: AppContainer = request.app.state.container
        return state_container.photo_service.react(photo_id, reaction_type)

    @app.post("/api/photos/{photo_id}/comment")
    async def comment(
        photo_id: str,
        payload: CommentRequest,
        request: Request,
        identity: Identity = Depends(require_identity),
    ) -> list[CommentResponse]:
        """Append a comment to a photo."""
        state_container: AppContainer = request.app.state.container
        comments = state_container.photo_service.comment(
            photo_id, identity, payload.text
        )
        return [CommentResponse.from_domain(c) for c in comments]

    @app.post(
        "/api/photos/{photo_id}/share",
        dependencies=[Depends(require_identity)],
    )
    async def share(photo_id: str, request: Request) -> ShareResponse:
        """Record a share of a photo."""
        state_container: AppContainer = request.app.state.container
        return ShareResponse(shares=state_container.photo_service.share(photo_id))

    return app
