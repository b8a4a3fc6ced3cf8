from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base
from src.service.catalog.driven_adapter.model.common import new_id, utc_now

if TYPE_CHECKING:
    from src.service.catalog.driven_adapter.model.add_on_model import EventAddOnModel
    from src.service.catalog.driven_adapter.model.ticket_type_model import TicketTypeModel
    from src.service.catalog.driven_adapter.model.venue_model import VenueModel


class EventModel(Base):
    __tablename__ = 'events'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    venue_id: Mapped[str] = mapped_column(String(36), ForeignKey('venues.id'), nullable=False, index=True)
    media_urls: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )

    # Relationships (loaded explicitly with selectinload in the query repo)
    venue: Mapped['VenueModel'] = relationship('VenueModel', lazy='raise')
    ticket_types: Mapped[List['TicketTypeModel']] = relationship(
        'TicketTypeModel', back_populates='event', lazy='raise', order_by='TicketTypeModel.created_at'
    )
    event_add_ons: Mapped[List['EventAddOnModel']] = relationship(
        'EventAddOnModel', back_populates='event', lazy='raise', order_by='EventAddOnModel.created_at'
    )
