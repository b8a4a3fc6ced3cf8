from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.cache.entity_list_cache import EntityListCache
from src.service.catalog.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.catalog.domain.entity.event_entity import Event


class ListEventsUseCase:
    def __init__(
        self, event_query_repo: IEventQueryRepo, event_list_cache: EntityListCache[Event]
    ) -> None:
        self.event_query_repo = event_query_repo
        self.event_list_cache = event_list_cache

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        event_list_cache: EntityListCache[Event] = Depends(Provide[Container.event_list_cache]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo, event_list_cache=event_list_cache)

    @Logger.io
    async def list_events(self, *, refresh: bool = False) -> List[Event]:
        """Events ascending by start_date, each with venue, ticket types and add-ons."""
        if refresh or not self.event_list_cache.is_loaded:
            self.event_list_cache.replace(await self.event_query_repo.list_events())
            Logger.base.info(f'🔄 [LIST_EVENTS] Reloaded {len(self.event_list_cache)} events')
        return self.event_list_cache.items()

    def invalidate(self) -> None:
        self.event_list_cache.invalidate()
