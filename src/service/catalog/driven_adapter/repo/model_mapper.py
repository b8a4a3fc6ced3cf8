"""ORM row -> domain entity conversion shared by the command and query repos."""

from datetime import datetime, timezone
from typing import Optional

from src.service.catalog.domain.entity.event_entity import AddOn, Event, EventAddOn, TicketType
from src.service.catalog.domain.entity.venue_entity import Venue
from src.service.catalog.driven_adapter.model.add_on_model import AddOnModel, EventAddOnModel
from src.service.catalog.driven_adapter.model.event_model import EventModel
from src.service.catalog.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.catalog.driven_adapter.model.venue_model import VenueModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def venue_to_entity(model: VenueModel) -> Venue:
    return Venue(
        id=model.id,
        name=model.name,
        address=model.address,
        city=model.city,
        zip_code=model.zip_code,
        description=list(model.description or []),
        capacity=model.capacity,
        rental_rate_per_hour=float(model.rental_rate_per_hour),
        is_active=model.is_active,
        email=model.email,
        phone=model.phone,
        website=model.website,
        media_urls=list(model.media_urls or []),
        created_at=as_utc(model.created_at),
    )


def add_on_to_entity(model: AddOnModel) -> AddOn:
    return AddOn(
        id=model.id,
        name=model.name,
        description=model.description,
        price=model.price,
        created_at=as_utc(model.created_at),
    )


def event_add_on_to_entity(model: EventAddOnModel, *, with_add_on: bool = True) -> EventAddOn:
    return EventAddOn(
        id=model.id,
        event_id=model.event_id,
        add_on_id=model.add_on_id,
        price=model.price,
        add_on=add_on_to_entity(model.add_on) if with_add_on else None,
        created_at=as_utc(model.created_at),
    )


def ticket_type_to_entity(model: TicketTypeModel) -> TicketType:
    return TicketType(
        id=model.id,
        event_id=model.event_id,
        name=model.name,
        description=model.description,
        price=model.price,
        quantity_available=model.quantity_available,
        start_sales_date=as_utc(model.start_sales_date),
        end_sales_date=as_utc(model.end_sales_date),
        created_at=as_utc(model.created_at),
    )


def event_to_entity(model: EventModel, *, expanded: bool = True) -> Event:
    """`expanded` requires venue, ticket_types and event_add_ons(add_on) to be loaded."""
    return Event(
        id=model.id,
        name=model.name,
        description=model.description,
        start_date=as_utc(model.start_date),  # type: ignore[arg-type]
        end_date=as_utc(model.end_date),  # type: ignore[arg-type]
        venue_id=model.venue_id,
        media_urls=list(model.media_urls or []),
        created_at=as_utc(model.created_at),
        venue=venue_to_entity(model.venue) if expanded else None,
        ticket_types=[ticket_type_to_entity(t) for t in model.ticket_types] if expanded else [],
        add_ons=[event_add_on_to_entity(a) for a in model.event_add_ons] if expanded else [],
    )
