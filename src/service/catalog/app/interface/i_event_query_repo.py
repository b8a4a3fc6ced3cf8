from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.catalog.domain.entity.event_entity import Event


class IEventQueryRepo(ABC):
    """Event Query Repository Interface - CQRS Read Side"""

    @abstractmethod
    async def list_events(self) -> List[Event]:
        """All events ascending by start_date, expanded with venue, ticket types and add-ons."""
        pass

    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[Event]:
        pass
