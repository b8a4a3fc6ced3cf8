from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.service.catalog.domain.entity.event_entity import Event, EventAddOn, TicketType
from src.service.catalog.driving_adapter.http_controller.schema.submission_schema import (
    SubmissionResponse,
)
from src.service.catalog.driving_adapter.http_controller.schema.venue_schema import VenueResponse


class TicketTypeResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: float
    quantity_available: Optional[int] = None
    start_sales_date: Optional[datetime] = None
    end_sales_date: Optional[datetime] = None

    @classmethod
    def from_entity(cls, ticket_type: TicketType) -> 'TicketTypeResponse':
        return cls(
            id=ticket_type.id or '',
            name=ticket_type.name,
            description=ticket_type.description,
            price=float(ticket_type.price),
            quantity_available=ticket_type.quantity_available,
            start_sales_date=ticket_type.start_sales_date,
            end_sales_date=ticket_type.end_sales_date,
        )


class EventAddOnResponse(BaseModel):
    id: str
    add_on_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    price_override: Optional[float] = None
    effective_price: float

    @classmethod
    def from_entity(cls, link: EventAddOn) -> 'EventAddOnResponse':
        return cls(
            id=link.id or '',
            add_on_id=link.add_on_id,
            name=link.add_on.name if link.add_on else None,
            description=link.add_on.description if link.add_on else None,
            price_override=float(link.price) if link.price is not None else None,
            effective_price=float(link.effective_price),
        )


class EventResponse(BaseModel):
    id: str
    name: str
    description: str
    start_date: datetime
    end_date: datetime
    venue_id: str
    media_urls: List[str]
    created_at: Optional[datetime] = None
    venue: Optional[VenueResponse] = None
    ticket_types: List[TicketTypeResponse] = []
    add_ons: List[EventAddOnResponse] = []

    class Config:
        json_schema_extra = {
            'example': {
                'id': '0192f3a4-9999-7d8e-9f00-112233445566',
                'name': 'Spring Concert',
                'description': 'An evening of live music',
                'start_date': '2025-05-01T19:00:00Z',
                'end_date': '2025-05-01T22:00:00Z',
                'venue_id': '0192f3a4-5b6c-7d8e-9f00-112233445566',
                'media_urls': [],
                'ticket_types': [
                    {
                        'id': '0192f3a4-aaaa-7d8e-9f00-112233445566',
                        'name': 'General Admission',
                        'price': 25.0,
                        'quantity_available': 200,
                    }
                ],
                'add_ons': [],
            }
        }

    @classmethod
    def from_entity(cls, event: Event) -> 'EventResponse':
        return cls(
            id=event.id or '',
            name=event.name,
            description=event.description,
            start_date=event.start_date,
            end_date=event.end_date,
            venue_id=event.venue_id,
            media_urls=event.media_urls,
            created_at=event.created_at,
            venue=VenueResponse.from_entity(event.venue) if event.venue else None,
            ticket_types=[TicketTypeResponse.from_entity(t) for t in event.ticket_types],
            add_ons=[EventAddOnResponse.from_entity(a) for a in event.add_ons],
        )


class EventSubmissionResponse(SubmissionResponse):
    event: Optional[EventResponse] = None
