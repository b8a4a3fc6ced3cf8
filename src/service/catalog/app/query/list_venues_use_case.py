from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.cache.entity_list_cache import EntityListCache
from src.service.catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.catalog.domain.entity.venue_entity import Venue


class ListVenuesUseCase:
    def __init__(
        self, venue_query_repo: IVenueQueryRepo, venue_list_cache: EntityListCache[Venue]
    ) -> None:
        self.venue_query_repo = venue_query_repo
        self.venue_list_cache = venue_list_cache

    @classmethod
    @inject
    def depends(
        cls,
        venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo]),
        venue_list_cache: EntityListCache[Venue] = Depends(Provide[Container.venue_list_cache]),
    ) -> Self:
        return cls(venue_query_repo=venue_query_repo, venue_list_cache=venue_list_cache)

    @Logger.io
    async def list_venues(self, *, refresh: bool = False) -> List[Venue]:
        """Venues ascending by name; served from the cache unless `refresh` or not yet loaded."""
        if refresh or not self.venue_list_cache.is_loaded:
            self.venue_list_cache.replace(await self.venue_query_repo.list_venues())
            Logger.base.info(f'🔄 [LIST_VENUES] Reloaded {len(self.venue_list_cache)} venues')
        return self.venue_list_cache.items()

    def invalidate(self) -> None:
        self.venue_list_cache.invalidate()
