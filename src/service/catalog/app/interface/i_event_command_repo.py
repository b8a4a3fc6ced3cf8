from abc import ABC, abstractmethod
from typing import List

from src.service.catalog.app.dto.event_draft import EventDraft
from src.service.catalog.domain.entity.event_entity import Event


class IEventCommandRepo(ABC):
    """Event Command Repository Interface - CQRS Write Side"""

    @abstractmethod
    async def create_event(self, *, draft: EventDraft) -> Event:
        """
        Insert the event, its default ticket type and add-on links in one transaction.

        Raises ReferentialError when the venue (or an add-on) does not exist.
        """
        pass

    @abstractmethod
    async def update_media_urls(self, *, event_id: str, media_urls: List[str]) -> Event:
        pass
