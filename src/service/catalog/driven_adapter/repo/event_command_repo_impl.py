"""
Event Command Repository Implementation - CQRS Write Side

create_event writes the event, its default ticket type and its add-on links in
a single transaction; the venue/add-on foreign keys are enforced by the
database and surface as ReferentialError.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.dto.event_draft import EventDraft
from src.service.catalog.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.catalog.domain.entity.event_entity import Event
from src.service.catalog.driven_adapter.model.add_on_model import EventAddOnModel
from src.service.catalog.driven_adapter.model.common import new_id
from src.service.catalog.driven_adapter.model.event_model import EventModel
from src.service.catalog.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.catalog.driven_adapter.repo.db_error_translator import translate_db_errors
from src.service.catalog.driven_adapter.repo.event_query_repo_impl import expanded_event_query
from src.service.catalog.driven_adapter.repo.model_mapper import event_to_entity
from src.service.catalog.driven_adapter.repo.session_mixin import SessionFactoryMixin


class EventCommandRepoImpl(SessionFactoryMixin, IEventCommandRepo):
    async def _load_expanded(self, session: AsyncSession, event_id: str) -> Event:
        result = await session.execute(
            expanded_event_query()
            .where(EventModel.id == event_id)
            .execution_options(populate_existing=True)
        )
        return event_to_entity(result.scalar_one())

    @Logger.io
    async def create_event(self, *, draft: EventDraft) -> Event:
        missing = f'Venue {draft.venue_id} does not exist'
        if draft.add_ons:
            missing = f'Venue {draft.venue_id} or one of the selected add-ons does not exist'

        async with translate_db_errors('create event', referential_message=missing):
            async with self._get_session() as session:
                event_id = new_id()
                session.add(
                    EventModel(
                        id=event_id,
                        name=draft.name,
                        description=draft.description,
                        start_date=draft.start_date,
                        end_date=draft.end_date,
                        venue_id=draft.venue_id,
                        media_urls=[],
                    )
                )
                session.add(
                    TicketTypeModel(
                        event_id=event_id,
                        name=draft.ticket_type_name,
                        price=draft.price,
                        quantity_available=draft.ticket_count,
                    )
                )
                session.add_all(
                    EventAddOnModel(event_id=event_id, add_on_id=link.add_on_id, price=link.price)
                    for link in draft.add_ons
                )
                await session.commit()

                Logger.base.info(
                    f'🎫 [EVENT] Inserted event {event_id} at venue {draft.venue_id} '
                    f'({draft.ticket_count} x {draft.ticket_type_name}, {len(draft.add_ons)} add-ons)'
                )
                return await self._load_expanded(session, event_id)

    @Logger.io
    async def update_media_urls(self, *, event_id: str, media_urls: List[str]) -> Event:
        async with translate_db_errors('update event media'):
            async with self._get_session() as session:
                event_model = await session.get(EventModel, event_id)
                if event_model is None:
                    raise PersistenceError(f'Event {event_id} not found')

                event_model.media_urls = list(media_urls)
                await session.commit()
                return await self._load_expanded(session, event_id)
