"""Dependency container wiring for the application."""

from dataclasses import dataclass

from photosphere.adapters.memory_photo_repository import InMemoryPhotoRepository
from photosphere.adapters.memory_user_repository import InMemoryUserRepository
from photosphere.config import Settings
from photosphere.services.photos import PhotoService, welcome_photo
from photosphere.services.tokens import TokenService
from photosphere.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    token_service: TokenService
    photo_service: PhotoService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    user_repository = InMemoryUserRepository()
    photo_repository = InMemoryPhotoRepository()
    if resolved_settings.seed_welcome_photo:
        photo_repository.add_photo(welcome_photo())

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        token_service=TokenService(
            secret=resolved_settings.jwt_secret,
            ttl_minutes=resolved_settings.token_ttl_minutes,
        ),
        photo_service=PhotoService(
            repository=photo_repository,
            max_upload_bytes=resolved_settings.max_upload_bytes,
        ),
    )
