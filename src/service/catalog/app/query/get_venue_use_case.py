from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.catalog.domain.entity.venue_entity import Venue


class GetVenueUseCase:
    def __init__(self, venue_query_repo: IVenueQueryRepo) -> None:
        self.venue_query_repo = venue_query_repo

    @classmethod
    @inject
    def depends(
        cls, venue_query_repo: IVenueQueryRepo = Depends(Provide[Container.venue_query_repo])
    ) -> Self:
        return cls(venue_query_repo=venue_query_repo)

    @Logger.io
    async def get_by_id(self, *, venue_id: str) -> Venue:
        venue = await self.venue_query_repo.get_by_id(venue_id=venue_id)
        if venue is None:
            raise NotFoundError(f'Venue not found: {venue_id}')
        return venue
