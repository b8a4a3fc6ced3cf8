from typing import Any, List, Mapping, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.catalog.app.cache.entity_list_cache import EntityListCache
from src.service.catalog.app.command.submission_pipeline import SubmissionPipeline
from src.service.catalog.app.dto.event_draft import EventDraft, validate_event_input
from src.service.catalog.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.catalog.app.interface.i_media_storage import IMediaStorage
from src.service.catalog.domain.entity.event_entity import Event
from src.service.catalog.domain.enum.owner_kind import OwnerKind


class SubmitEventUseCase(SubmissionPipeline[EventDraft, Event]):
    """Event flavour: creation also writes the default ticket type and add-on links."""

    owner_kind = OwnerKind.EVENTS
    entity_label = 'event'

    def __init__(
        self,
        *,
        event_command_repo: IEventCommandRepo,
        media_storage: IMediaStorage,
        event_list_cache: EntityListCache[Event],
    ) -> None:
        super().__init__(media_storage=media_storage, cache=event_list_cache)
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
        media_storage: IMediaStorage = Depends(Provide[Container.media_storage]),
        event_list_cache: EntityListCache[Event] = Depends(Provide[Container.event_list_cache]),
    ) -> Self:
        return cls(
            event_command_repo=event_command_repo,
            media_storage=media_storage,
            event_list_cache=event_list_cache,
        )

    def validate(self, raw: Mapping[str, Any]) -> EventDraft:
        return validate_event_input(raw)

    async def create_entity(self, draft: EventDraft) -> Event:
        return await self.event_command_repo.create_event(draft=draft)

    async def attach_media(self, entity: Event, media_urls: List[str]) -> Event:
        return await self.event_command_repo.update_media_urls(
            event_id=self.entity_id(entity), media_urls=media_urls
        )

    def entity_id(self, entity: Event) -> str:
        assert entity.id is not None
        return entity.id
