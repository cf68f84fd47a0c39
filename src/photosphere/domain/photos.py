"""Domain models for the photo feed."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from uuid import UUID

DEFAULT_REACTION_KINDS = ("like", "love", "wow", "sad")


@dataclass(frozen=True)
class Comment:
    """A comment left on a photo."""

    user: str
    text: str


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a photo in the feed.

    Records are immutable; mutations replace the stored record with an
    updated copy. Reactions are held in a read-only view of a private copy.
    """

    id: UUID
    url: str
    title: str
    creator: str
    created_at: datetime
    reactions: Mapping[str, int] = field(default_factory=dict)
    comments: tuple[Comment, ...] = ()
    shares: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactions", MappingProxyType(dict(self.reactions)))
