"""
Event and the rows hanging off it.

An Event owns its ticket types (one-to-many) and links to shared add-ons
through EventAddOn rows, which may override the add-on price.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.catalog.domain.entity.venue_entity import Venue


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'{type(instance).__name__} {attribute.name} cannot be empty')


def _validate_end_not_before_start(instance: 'Event', attribute: attrs.Attribute, value: datetime) -> None:
    if value < instance.start_date:
        raise ValueError('Event end_date must not be before start_date')


def _validate_sales_window(
    instance: 'TicketType', attribute: attrs.Attribute, value: Optional[datetime]
) -> None:
    if value is not None and instance.start_sales_date is not None:
        if value < instance.start_sales_date:
            raise ValueError('TicketType end_sales_date must not be before start_sales_date')


def _to_decimal(value: object) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


_non_negative = attrs.validators.ge(0)
_optional_non_negative = attrs.validators.optional(attrs.validators.ge(0))


@attrs.define
class AddOn:
    name: str = attrs.field(validator=_validate_non_empty_string)
    price: Decimal = attrs.field(converter=_to_decimal, validator=_non_negative)
    description: str = ''
    id: Optional[str] = None
    created_at: Optional[datetime] = None


@attrs.define
class EventAddOn:
    add_on_id: str
    event_id: Optional[str] = None
    price: Optional[Decimal] = attrs.field(
        default=None,
        converter=attrs.converters.optional(_to_decimal),
        validator=_optional_non_negative,
    )
    add_on: Optional[AddOn] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def effective_price(self) -> Decimal:
        """Override price when set, otherwise the add-on's own price."""
        if self.price is not None:
            return self.price
        if self.add_on is None:
            raise DomainError(f'Add-on {self.add_on_id} is not loaded and has no override price')
        return self.add_on.price


@attrs.define
class TicketType:
    name: str = attrs.field(validator=_validate_non_empty_string)
    price: Decimal = attrs.field(converter=_to_decimal, validator=_non_negative)
    event_id: Optional[str] = None
    description: Optional[str] = None
    quantity_available: Optional[int] = attrs.field(default=None, validator=_optional_non_negative)
    start_sales_date: Optional[datetime] = None
    end_sales_date: Optional[datetime] = attrs.field(default=None, validator=_validate_sales_window)
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def is_on_sale(self, at: datetime) -> bool:
        if self.start_sales_date is not None and at < self.start_sales_date:
            return False
        if self.end_sales_date is not None and at > self.end_sales_date:
            return False
        return True


@attrs.define
class Event:
    name: str = attrs.field(validator=_validate_non_empty_string)
    description: str
    start_date: datetime
    end_date: datetime = attrs.field(validator=_validate_end_not_before_start)
    venue_id: str = attrs.field(validator=_validate_non_empty_string)
    media_urls: List[str] = attrs.field(factory=list)
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    # Expanded relations (present on reads)
    venue: Optional[Venue] = None
    ticket_types: List[TicketType] = attrs.field(factory=list)
    add_ons: List[EventAddOn] = attrs.field(factory=list)
