from enum import Enum


class TicketStatus(str, Enum):
    """active -> used | cancelled; used and cancelled are terminal."""

    ACTIVE = 'active'
    USED = 'used'
    CANCELLED = 'cancelled'
