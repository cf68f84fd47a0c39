"""Pydantic models for the HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from photosphere.domain.photos import Comment, PhotoRecord


class RegisterRequest(BaseModel):
    """Registration payload."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class LoginRequest(BaseModel):
    """Login payload."""

    email: str | None = None
    password: str | None = None


class CommentRequest(BaseModel):
    """Comment payload."""

    text: str | None = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str
    role: str


class HealthResponse(BaseModel):
    status: str
    uptime: float


class CommentResponse(BaseModel):
    """A comment as returned to clients."""

    user: str
    text: str

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(user=comment.user, text=comment.text)


class PhotoResponse(BaseModel):
    """A photo as returned to clients."""

    id: UUID
    url: str
    title: str
    creator: str
    reactions: dict[str, int]
    comments: list[CommentResponse]
    shares: int
    created_at: datetime

    @classmethod
    def from_domain(cls, photo: PhotoRecord) -> "PhotoResponse":
        return cls(
            id=photo.id,
            url=photo.url,
            title=photo.title,
            creator=photo.creator,
            reactions=dict(photo.reactions),
            comments=[CommentResponse.from_domain(c) for c in photo.comments],
            shares=photo.shares,
            created_at=photo.created_at,
        )


class ShareResponse(BaseModel):
    shares: int
