from typing import Any, List, Mapping, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.catalog.app.cache.entity_list_cache import EntityListCache
from src.service.catalog.app.command.submission_pipeline import SubmissionPipeline
from src.service.catalog.app.dto.venue_draft import VenueDraft, validate_venue_input
from src.service.catalog.app.interface.i_media_storage import IMediaStorage
from src.service.catalog.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.catalog.domain.entity.venue_entity import Venue
from src.service.catalog.domain.enum.owner_kind import OwnerKind


class SubmitVenueUseCase(SubmissionPipeline[VenueDraft, Venue]):
    owner_kind = OwnerKind.VENUES
    entity_label = 'venue'

    def __init__(
        self,
        *,
        venue_command_repo: IVenueCommandRepo,
        media_storage: IMediaStorage,
        venue_list_cache: EntityListCache[Venue],
    ) -> None:
        super().__init__(media_storage=media_storage, cache=venue_list_cache)
        self.venue_command_repo = venue_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        venue_command_repo: IVenueCommandRepo = Depends(Provide[Container.venue_command_repo]),
        media_storage: IMediaStorage = Depends(Provide[Container.media_storage]),
        venue_list_cache: EntityListCache[Venue] = Depends(Provide[Container.venue_list_cache]),
    ) -> Self:
        return cls(
            venue_command_repo=venue_command_repo,
            media_storage=media_storage,
            venue_list_cache=venue_list_cache,
        )

    def validate(self, raw: Mapping[str, Any]) -> VenueDraft:
        return validate_venue_input(raw)

    async def create_entity(self, draft: VenueDraft) -> Venue:
        return await self.venue_command_repo.create_venue(draft=draft)

    async def attach_media(self, entity: Venue, media_urls: List[str]) -> Venue:
        return await self.venue_command_repo.update_media_urls(
            venue_id=self.entity_id(entity), media_urls=media_urls
        )

    def entity_id(self, entity: Venue) -> str:
        assert entity.id is not None
        return entity.id
