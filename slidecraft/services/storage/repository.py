"""Presentation storage."""
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from slidecraft.models import GenerationResult, Presentation

logger = logging.getLogger(__name__)


class PresentationRepository(ABC):
    """Per-user presentation storage. Every read and delete is scoped to the owner."""

    @abstractmethod
    def create(self, user_id: str, result: GenerationResult) -> Presentation:
        """Persist a result, assigning its id and creation time."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Presentation]:
        """All presentations of a user, newest first."""

    @abstractmethod
    def get(self, presentation_id: str, user_id: str) -> Optional[Presentation]:
        """The presentation, or None if it does not exist or is not owned by the user."""

    @abstractmethod
    def delete(self, presentation_id: str, user_id: str) -> int:
        """Delete if owned by the user; returns the number of removed presentations."""


class InMemoryPresentationRepository(PresentationRepository):
    """Process-local repository. Contents are lost on restart."""

    def __init__(self):
        self._items: dict[str, Presentation] = {}
        self._lock = threading.Lock()

    def create(self, user_id: str, result: GenerationResult) -> Presentation:
        presentation = Presentation(
            id=uuid.uuid4().hex,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
            **result.model_dump(),
        )
        with self._lock:
            self._items[presentation.id] = presentation
        logger.info(f"Stored presentation {presentation.id} ({presentation.slide_count} slides) for user {user_id}")
        return presentation

    def list_by_user(self, user_id: str) -> list[Presentation]:
        with self._lock:
            owned = [p for p in self._items.values() if p.user_id == user_id]
        # Insertion order breaks ties between equal timestamps
        return list(reversed(sorted(owned, key=lambda p: p.created_at)))

    def get(self, presentation_id: str, user_id: str) -> Optional[Presentation]:
        with self._lock:
            presentation = self._items.get(presentation_id)
        if presentation is None or presentation.user_id != user_id:
            return None
        return presentation

    def delete(self, presentation_id: str, user_id: str) -> int:
        with self._lock:
            presentation = self._items.get(presentation_id)
            if presentation is None or presentation.user_id != user_id:
                return 0
            del self._items[presentation_id]
        logger.info(f"Deleted presentation {presentation_id} for user {user_id}")
        return 1


# Singleton instance
_repository: Optional[PresentationRepository] = None


def get_presentation_repository() -> PresentationRepository:
    """Get the singleton presentation repository."""
    global _repository
    if _repository is None:
        _repository = InMemoryPresentationRepository()
    return _repository
