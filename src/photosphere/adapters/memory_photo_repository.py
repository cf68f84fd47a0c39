"""In-memory photo repository."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID

from photosphere.domain.photos import PhotoRecord
from photosphere.services.photos import PhotoRepository


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """Process-local feed storage, newest photo first."""

    photos: list[PhotoRecord] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add_photo(self, photo: PhotoRecord) -> None:
        """Insert a photo at the front of the feed."""
        with self._lock:
            self.photos.insert(0, photo)

    def list_photos(self) -> list[PhotoRecord]:
        """Return a snapshot of the feed."""
        with self._lock:
            return list(self.photos)

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo by id, if present."""
        with self._lock:
            index = self._index_of(photo_id)
            return None if index is None else self.photos[index]

    def update_photo(
        self, photo_id: UUID, change: Callable[[PhotoRecord], PhotoRecord]
    ) -> PhotoRecord | None:
        """Replace a photo with change(photo) while holding the lock."""
        with self._lock:
            index = self._index_of(photo_id)
            if index is None:
                return None
            updated = change(self.photos[index])
            self.photos[index] = updated
            return updated

    def _index_of(self, photo_id: UUID) -> int | None:
        for index, photo in enumerate(self.photos):
            if photo.id == photo_id:
                return index
        return None
