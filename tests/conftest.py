"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from photosphere.adapters.memory_photo_repository import InMemoryPhotoRepository
from photosphere.adapters.memory_user_repository import InMemoryUserRepository
from photosphere.config import Settings
from photosphere.containers import AppContainer
from photosphere.services.photos import PhotoService
from photosphere.services.tokens import TokenService
from photosphere.services.users import UserService

TEST_SECRET = "test-secret-with-at-least-32-bytes!"


def register_and_login(
    client: TestClient,
    *,
    name: str = "alice",
    email: str = "a@x.com",
    password: str = "pw",
    role: str = "creator",
) -> str:
    """Register a user through the API and return a bearer token."""
    response = client.post(
        "/api/register",
        json={"name": name, "email": email, "password": password, "role": role},
    )
    assert response.status_code == 200
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["token"]


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        seed_welcome_photo=False,
        max_upload_bytes=1024,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService(
        secret=settings.jwt_secret, ttl_minutes=settings.token_ttl_minutes
    )


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    photo_repository: InMemoryPhotoRepository,
    token_service: TokenService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        token_service=token_service,
        photo_service=PhotoService(
            repository=photo_repository,
            max_upload_bytes=settings.max_upload_bytes,
        ),
    )
