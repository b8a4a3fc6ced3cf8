from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from src.service.catalog.app.dto.input_validation import (
    ID_LENGTH,
    MAX_AMOUNT,
    MAX_INTEGER,
    NAME_LENGTH,
    DraftModel,
    blank_to_none,
    check_max_length,
    parse_draft,
)


DEFAULT_TICKET_TYPE_NAME = 'General Admission'


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class AddOnLinkDraft(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    add_on_id: str
    price: Optional[Decimal] = None

    @field_validator('add_on_id')
    @classmethod
    def _check_add_on_id(cls, v: str) -> str:
        return check_max_length(v, ID_LENGTH, 'Add-on id')

    @field_validator('price')
    @classmethod
    def _check_price(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is None:
            return v
        if v < 0:
            raise ValueError('Add-on price must be 0 or greater.')
        if v > MAX_AMOUNT:
            raise ValueError(f'Add-on price must be at most {MAX_AMOUNT}.')
        return v


class EventDraft(DraftModel):
    """Normalized event input; ticket_count/price become the default ticket type."""

    REQUIRED_MESSAGES: ClassVar[Dict[str, str]] = {
        'name': 'Event name must be at least 2 characters.',
        'venue_id': 'Event venue must be at least 2 characters.',
        'description': 'Event description must be at least 10 characters.',
        'start_date': 'Start date and time is required.',
        'end_date': 'End date and time is required.',
        'ticket_count': 'Number of tickets must be at least 1.',
        'price': 'Price per ticket must be 0 or greater.',
    }

    name: str
    venue_id: str
    description: str
    start_date: datetime
    end_date: datetime
    ticket_count: int
    price: Decimal
    ticket_type_name: str = DEFAULT_TICKET_TYPE_NAME
    add_ons: List[AddOnLinkDraft] = []

    @field_validator('name')
    @classmethod
    def _check_name(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError('Event name must be at least 2 characters.')
        return check_max_length(v, NAME_LENGTH, 'Event name')

    @field_validator('venue_id')
    @classmethod
    def _check_venue(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError('Event venue must be at least 2 characters.')
        return check_max_length(v, ID_LENGTH, 'Event venue')

    @field_validator('description')
    @classmethod
    def _check_description(cls, v: str) -> str:
        if len(v) < 10:
            raise ValueError('Event description must be at least 10 characters.')
        return v

    @field_validator('start_date', 'end_date')
    @classmethod
    def _normalize_timestamp(cls, v: datetime) -> datetime:
        return _as_utc(v)

    @field_validator('end_date')
    @classmethod
    def _check_end_after_start(cls, v: datetime, info: ValidationInfo) -> datetime:
        start = info.data.get('start_date')
        if start is not None and v < start:
            raise ValueError('End date and time must be after the start date and time.')
        return v

    @field_validator('ticket_count')
    @classmethod
    def _check_ticket_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError('Number of tickets must be at least 1.')
        if v > MAX_INTEGER:
            raise ValueError(f'Number of tickets must be at most {MAX_INTEGER}.')
        return v

    @field_validator('price')
    @classmethod
    def _check_price(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError('Price per ticket must be 0 or greater.')
        if v > MAX_AMOUNT:
            raise ValueError(f'Price per ticket must be at most {MAX_AMOUNT}.')
        return v

    @field_validator('ticket_type_name', mode='before')
    @classmethod
    def _default_ticket_type_name(cls, v: Any) -> Any:
        return DEFAULT_TICKET_TYPE_NAME if blank_to_none(v) is None else v

    @field_validator('ticket_type_name')
    @classmethod
    def _check_ticket_type_name(cls, v: str) -> str:
        return check_max_length(v, NAME_LENGTH, 'Ticket type name')

    @field_validator('add_ons', mode='before')
    @classmethod
    def _no_add_ons(cls, v: Any) -> Any:
        return [] if v is None else v


def validate_event_input(raw: Mapping[str, Any]) -> EventDraft:
    return parse_draft(EventDraft, raw)
