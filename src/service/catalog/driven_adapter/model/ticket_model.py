from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base
from src.service.catalog.driven_adapter.model.common import new_id, utc_now


class TicketModel(Base):
    __tablename__ = 'tickets'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    ticket_type_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('ticket_types.id'), nullable=False, index=True
    )
    purchaser_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='active')
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False
    )
