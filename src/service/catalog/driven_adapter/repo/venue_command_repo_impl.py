"""
Venue Command Repository Implementation - CQRS Write Side
"""

from typing import List

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.dto.venue_draft import VenueDraft
from src.service.catalog.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.catalog.domain.entity.venue_entity import Venue
from src.service.catalog.driven_adapter.model.venue_model import VenueModel
from src.service.catalog.driven_adapter.repo.db_error_translator import translate_db_errors
from src.service.catalog.driven_adapter.repo.model_mapper import venue_to_entity
from src.service.catalog.driven_adapter.repo.session_mixin import SessionFactoryMixin


class VenueCommandRepoImpl(SessionFactoryMixin, IVenueCommandRepo):
    @Logger.io
    async def create_venue(self, *, draft: VenueDraft) -> Venue:
        async with translate_db_errors('create venue'):
            async with self._get_session() as session:
                venue_model = VenueModel(
                    name=draft.name,
                    address=draft.address,
                    city=draft.city,
                    zip_code=draft.zip_code,
                    description=list(draft.description),
                    capacity=draft.capacity,
                    rental_rate_per_hour=draft.rental_rate_per_hour,
                    email=draft.email,
                    phone=draft.phone,
                    website=draft.website,
                    media_urls=[],
                )
                session.add(venue_model)
                await session.commit()

                Logger.base.info(f'🏛️  [VENUE] Inserted venue {venue_model.id} ({venue_model.name})')
                return venue_to_entity(venue_model)

    @Logger.io
    async def update_media_urls(self, *, venue_id: str, media_urls: List[str]) -> Venue:
        async with translate_db_errors('update venue media'):
            async with self._get_session() as session:
                venue_model = await session.get(VenueModel, venue_id)
                if venue_model is None:
                    raise PersistenceError(f'Venue {venue_id} not found')

                venue_model.media_urls = list(media_urls)
                await session.commit()
                return venue_to_entity(venue_model)
