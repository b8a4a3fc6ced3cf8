from abc import ABC, abstractmethod
from typing import List

from src.service.catalog.app.dto.venue_draft import VenueDraft
from src.service.catalog.domain.entity.venue_entity import Venue


class IVenueCommandRepo(ABC):
    """Venue Command Repository Interface - CQRS Write Side"""

    @abstractmethod
    async def create_venue(self, *, draft: VenueDraft) -> Venue:
        """Insert one venue atomically and return the persisted row (generated id, created_at)."""
        pass

    @abstractmethod
    async def update_media_urls(self, *, venue_id: str, media_urls: List[str]) -> Venue:
        """Replace the venue's media_urls. Missing venue raises PersistenceError."""
        pass
