from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.service.catalog.domain.entity.venue_entity import Venue
from src.service.catalog.driving_adapter.http_controller.schema.submission_schema import (
    SubmissionResponse,
)


class VenueResponse(BaseModel):
    id: str
    name: str
    address: str
    city: str
    zip_code: str
    description: List[str]
    capacity: int
    rental_rate_per_hour: float
    is_active: bool
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    media_urls: List[str]
    created_at: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            'example': {
                'id': '0192f3a4-5b6c-7d8e-9f00-112233445566',
                'name': 'Main Hall',
                'address': '123 Elm St',
                'city': 'Springfield',
                'zip_code': '62704',
                'description': ['indoor', 'stage'],
                'capacity': 100,
                'rental_rate_per_hour': 50.0,
                'is_active': True,
                'email': 'hall@example.com',
                'phone': None,
                'website': 'https://mainhall.example.com',
                'media_urls': [
                    'http://localhost:8000/media/venues/0192f3a4-5b6c-7d8e-9f00-112233445566/0192f3a4aa.jpg'
                ],
                'created_at': '2025-01-01T10:00:00Z',
            }
        }

    @classmethod
    def from_entity(cls, venue: Venue) -> 'VenueResponse':
        return cls(
            id=venue.id or '',
            name=venue.name,
            address=venue.address,
            city=venue.city,
            zip_code=venue.zip_code,
            description=venue.description,
            capacity=venue.capacity,
            rental_rate_per_hour=venue.rental_rate_per_hour,
            is_active=venue.is_active,
            email=venue.email,
            phone=venue.phone,
            website=venue.website,
            media_urls=venue.media_urls,
            created_at=venue.created_at,
        )


class VenueSubmissionResponse(SubmissionResponse):
    venue: Optional[VenueResponse] = None
