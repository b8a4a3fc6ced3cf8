"""
Venue Query Repository Implementation - CQRS Read Side
"""

from typing import List, Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.catalog.domain.entity.venue_entity import Venue
from src.service.catalog.driven_adapter.model.venue_model import VenueModel
from src.service.catalog.driven_adapter.repo.db_error_translator import translate_db_errors
from src.service.catalog.driven_adapter.repo.model_mapper import venue_to_entity
from src.service.catalog.driven_adapter.repo.session_mixin import SessionFactoryMixin


class VenueQueryRepoImpl(SessionFactoryMixin, IVenueQueryRepo):
    @Logger.io
    async def list_venues(self) -> List[Venue]:
        async with translate_db_errors('list venues'):
            async with self._get_session() as session:
                result = await session.execute(
                    select(VenueModel).order_by(VenueModel.name.asc(), VenueModel.id.asc())
                )
                return [venue_to_entity(m) for m in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, *, venue_id: str) -> Optional[Venue]:
        async with translate_db_errors('load venue'):
            async with self._get_session() as session:
                venue_model = await session.get(VenueModel, venue_id)
                return venue_to_entity(venue_model) if venue_model else None
