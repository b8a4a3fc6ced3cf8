"""
Event Query Repository Implementation - CQRS Read Side

Events are always returned expanded: venue, ticket types and add-ons
(with the linked add-on row) are fetched with selectinload.
"""

from typing import List, Optional

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.catalog.domain.entity.event_entity import Event
from src.service.catalog.driven_adapter.model.add_on_model import EventAddOnModel
from src.service.catalog.driven_adapter.model.event_model import EventModel
from src.service.catalog.driven_adapter.repo.db_error_translator import translate_db_errors
from src.service.catalog.driven_adapter.repo.model_mapper import event_to_entity
from src.service.catalog.driven_adapter.repo.session_mixin import SessionFactoryMixin


def expanded_event_query() -> Select:
    return select(EventModel).options(
        selectinload(EventModel.venue),
        selectinload(EventModel.ticket_types),
        selectinload(EventModel.event_add_ons).selectinload(EventAddOnModel.add_on),
    )


class EventQueryRepoImpl(SessionFactoryMixin, IEventQueryRepo):
    @Logger.io
    async def list_events(self) -> List[Event]:
        async with translate_db_errors('list events'):
            async with self._get_session() as session:
                result = await session.execute(
                    expanded_event_query().order_by(EventModel.start_date.asc(), EventModel.id.asc())
                )
                events = [event_to_entity(m) for m in result.scalars().all()]

        Logger.base.info(f'📋 [EVENT] Loaded {len(events)} events')
        return events

    @Logger.io
    async def get_by_id(self, *, event_id: str) -> Optional[Event]:
        async with translate_db_errors('load event'):
            async with self._get_session() as session:
                result = await session.execute(
                    expanded_event_query().where(EventModel.id == event_id)
                )
                event_model = result.scalar_one_or_none()
                return event_to_entity(event_model) if event_model else None
