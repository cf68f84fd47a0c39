"""Photo feed business logic."""

import base64
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from photosphere.domain.errors import ForbiddenError, InvalidInputError, NotFoundError
from photosphere.domain.models import Identity
from photosphere.domain.photos import DEFAULT_REACTION_KINDS, Comment, PhotoRecord

logger = logging.getLogger(__name__)

_DEFAULT_MIME_TYPE = "application/octet-stream"


class PhotoRepository(Protocol):
    """Persistence interface for the photo feed."""

    def add_photo(self, photo: PhotoRecord) -> None:
        """Insert a photo at the front of the feed."""

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos, newest first."""

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def update_photo(
        self, photo_id: UUID, change: Callable[[PhotoRecord], PhotoRecord]
    ) -> PhotoRecord | None:
        """Atomically replace a photo with change(photo) and return the result."""


def build_data_url(image_bytes: bytes, mime_type: str | None) -> str:
    """Encode image bytes as an inline data URI."""
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type or _DEFAULT_MIME_TYPE};base64,{encoded}"


def welcome_photo() -> PhotoRecord:
    """Return the photo shown on a freshly started feed."""
    return PhotoRecord(
        id=uuid4(),
        url="https://picsum.photos/900/600",
        title="Welcome to PhotoSphere",
        creator="PhotoSphere Team",
        created_at=datetime.now(tz=UTC),
        reactions={"like": 4, "love": 3, "wow": 2, "sad": 0},
        comments=(Comment(user="Admin", text="Enjoy the feed"),),
        shares=2,
    )


@dataclass
class PhotoService:
    """Application service for the feed and photo interactions."""

    repository: PhotoRepository
    max_upload_bytes: int = 5 * 1024 * 1024

    def list_feed(self) -> list[PhotoRecord]:
        """Return the full feed, most recent first."""
        return self.repository.list_photos()

    def upload(
        self,
        identity: Identity,
        title: str | None,
        image_bytes: bytes | None,
        mime_type: str | None,
    ) -> PhotoRecord:
        """Publish a new photo on behalf of a creator."""
        if not identity.is_creator:
            raise ForbiddenError("Only creators can upload photos")
        cleaned_title = (title or "").strip()
        if not cleaned_title:
            raise InvalidInputError("Title is required")
        if not image_bytes:
            raise InvalidInputError("Image is required")
        if len(image_bytes) > self.max_upload_bytes:
            raise InvalidInputError("Image is too large")

        photo = PhotoRecord(
            id=uuid4(),
            url=build_data_url(image_bytes, mime_type),
            title=cleaned_title,
            creator=identity.name,
            created_at=datetime.now(tz=UTC),
            reactions=dict.fromkeys(DEFAULT_REACTION_KINDS, 0),
        )
        self.repository.add_photo(photo)
        logger.info(
            "Photo uploaded",
            extra={"photo_id": str(photo.id), "user_id": str(identity.user_id)},
        )
        return photo

    def react(self, photo_id: str | UUID, kind: str) -> dict[str, int]:
        """Increment a reaction counter and return the reaction mapping."""
        if not kind:
            raise InvalidInputError("Reaction type is required")

        def add_reaction(photo: PhotoRecord) -> PhotoRecord:
            reactions = dict(photo.reactions)
            reactions[kind] = reactions.get(kind, 0) + 1
            return replace(photo, reactions=reactions)

        return dict(self._update(photo_id, add_reaction).reactions)

    def comment(
        self, photo_id: str | UUID, identity: Identity, text: str | None
    ) -> list[Comment]:
        """Append a comment and return the photo's comments in order."""
        resolved_id = self._require_photo(photo_id)
        cleaned_text = (text or "").strip()
        if not cleaned_text:
            raise InvalidInputError("Comment text is required")
        new_comment = Comment(user=identity.name, text=cleaned_text)

        def add_comment(photo: PhotoRecord) -> PhotoRecord:
            return replace(photo, comments=(*photo.comments, new_comment))

        return list(self._update(resolved_id, add_comment).comments)

    def share(self, photo_id: str | UUID) -> int:
        """Increment the share counter and return its new value."""

        def add_share(photo: PhotoRecord) -> PhotoRecord:
            return replace(photo, shares=photo.shares + 1)

        return self._update(photo_id, add_share).shares

    def _update(
        self, photo_id: str | UUID, change: Callable[[PhotoRecord], PhotoRecord]
    ) -> PhotoRecord:
        updated = self.repository.update_photo(_parse_photo_id(photo_id), change)
        if updated is None:
            raise NotFoundError("Photo not found")
        return updated

    def _require_photo(self, photo_id: str | UUID) -> UUID:
        resolved_id = _parse_photo_id(photo_id)
        if self.repository.get_photo(resolved_id) is None:
            raise NotFoundError("Photo not found")
        return resolved_id


def _parse_photo_id(photo_id: str | UUID) -> UUID:
    """Parse a photo id; malformed ids cannot match any photo."""
    if isinstance(photo_id, UUID):
        return photo_id
    try:
        return UUID(photo_id)
    except ValueError as exc:
        raise NotFoundError("Photo not found") from exc
