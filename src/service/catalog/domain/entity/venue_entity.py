from datetime import datetime
from typing import Any, List, Optional

import attrs


def _min_length(length: int) -> Any:
    def validator(instance: object, attribute: attrs.Attribute, value: str) -> None:
        if not value or len(value.strip()) < length:
            raise ValueError(f'Venue {attribute.name} must be at least {length} characters')

    return validator


@attrs.define
class Venue:
    name: str = attrs.field(validator=_min_length(2))
    address: str = attrs.field(validator=_min_length(5))
    city: str
    zip_code: str
    capacity: int = attrs.field(validator=attrs.validators.ge(1))
    rental_rate_per_hour: float = attrs.field(default=0, validator=attrs.validators.ge(0))
    description: List[str] = attrs.field(factory=list)
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    is_active: bool = True
    media_urls: List[str] = attrs.field(factory=list)
    id: Optional[str] = None
    created_at: Optional[datetime] = None
