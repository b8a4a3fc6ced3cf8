from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.catalog.domain.entity.venue_entity import Venue


class IVenueQueryRepo(ABC):
    """Venue Query Repository Interface - CQRS Read Side"""

    @abstractmethod
    async def list_venues(self) -> List[Venue]:
        """All venues, ascending by name."""
        pass

    @abstractmethod
    async def get_by_id(self, *, venue_id: str) -> Optional[Venue]:
        pass
