from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base
from src.service.catalog.driven_adapter.model.common import new_id, utc_now

if TYPE_CHECKING:
    from src.service.catalog.driven_adapter.model.event_model import EventModel


class AddOnModel(Base):
    __tablename__ = 'add_ons'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )


class EventAddOnModel(Base):
    __tablename__ = 'event_add_ons'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    event_id: Mapped[str] = mapped_column(String(36), ForeignKey('events.id'), nullable=False, index=True)
    add_on_id: Mapped[str] = mapped_column(String(36), ForeignKey('add_ons.id'), nullable=False)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)  # override
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )

    event: Mapped['EventModel'] = relationship('EventModel', back_populates='event_add_ons', lazy='raise')
    add_on: Mapped['AddOnModel'] = relationship('AddOnModel', lazy='raise')

    __table_args__ = (UniqueConstraint('event_id', 'add_on_id', name='uq_event_add_on'),)
