from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.catalog.domain.enum.ticket_status import TicketStatus


@attrs.define
class Ticket:
    ticket_type_id: str
    purchaser_id: str
    status: TicketStatus = TicketStatus.ACTIVE
    purchase_date: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def _ensure_active(self, action: str) -> None:
        if self.status != TicketStatus.ACTIVE:
            raise DomainError(f'Cannot {action} a {self.status.value} ticket')

    def mark_used(self) -> None:
        self._ensure_active('use')
        self.status = TicketStatus.USED

    def cancel(self) -> None:
        self._ensure_active('cancel')
        self.status = TicketStatus.CANCELLED
