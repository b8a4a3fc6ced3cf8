from typing import Annotated, Any, ClassVar, Dict, List, Mapping, Optional

from email_validator import EmailNotValidError, validate_email
import pydantic
from pydantic import AnyHttpUrl, Field, TypeAdapter, field_validator

from src.service.catalog.app.dto.input_validation import (
    ADDRESS_LENGTH,
    MAX_AMOUNT,
    MAX_INTEGER,
    NAME_LENGTH,
    PHONE_LENGTH,
    URL_LENGTH,
    ZIP_CODE_LENGTH,
    DraftModel,
    blank_to_none,
    check_max_length,
    parse_draft,
)


_HTTP_URL = TypeAdapter(AnyHttpUrl)


def _min_length(value: str, length: int, message: str) -> str:
    if len(value) < length:
        raise ValueError(message)
    return value


class VenueDraft(DraftModel):
    """Normalized venue input, ready to insert."""

    REQUIRED_MESSAGES: ClassVar[Dict[str, str]] = {
        'name': 'Name must be at least 2 characters',
        'address': 'Please enter a valid address',
        'city': 'City must be at least 2 characters',
        'zip_code': 'Please enter a valid ZIP code',
        'capacity': 'Capacity must be at least 1 person',
    }

    name: str
    address: str
    city: str
    zip_code: str
    capacity: int
    rental_rate_per_hour: Annotated[float, Field(allow_inf_nan=False)] = 0
    description: List[str] = []
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None

    @field_validator('name')
    @classmethod
    def _check_name(cls, v: str) -> str:
        _min_length(v, 2, 'Name must be at least 2 characters')
        return check_max_length(v, NAME_LENGTH, 'Name')

    @field_validator('address')
    @classmethod
    def _check_address(cls, v: str) -> str:
        _min_length(v, 5, 'Please enter a valid address')
        return check_max_length(v, ADDRESS_LENGTH, 'Address')

    @field_validator('city')
    @classmethod
    def _check_city(cls, v: str) -> str:
        _min_length(v, 2, 'City must be at least 2 characters')
        return check_max_length(v, NAME_LENGTH, 'City')

    @field_validator('zip_code')
    @classmethod
    def _check_zip_code(cls, v: str) -> str:
        _min_length(v, 5, 'Please enter a valid ZIP code')
        return check_max_length(v, ZIP_CODE_LENGTH, 'ZIP code')

    @field_validator('capacity')
    @classmethod
    def _check_capacity(cls, v: int) -> int:
        if v < 1:
            raise ValueError('Capacity must be at least 1 person')
        if v > MAX_INTEGER:
            raise ValueError(f'Capacity must be at most {MAX_INTEGER} people')
        return v

    @field_validator('rental_rate_per_hour', mode='before')
    @classmethod
    def _default_rate(cls, v: Any) -> Any:
        return 0 if blank_to_none(v) is None else v

    @field_validator('rental_rate_per_hour')
    @classmethod
    def _check_rate(cls, v: float) -> float:
        if v < 0:
            raise ValueError('Rate must be a positive number')
        if v > MAX_AMOUNT:
            raise ValueError(f'Rate must be at most {MAX_AMOUNT}')
        return v

    @field_validator('description', mode='before')
    @classmethod
    def _tags_as_list(cls, v: Any) -> Any:
        # A single free-text value becomes a one-tag list
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @field_validator('description')
    @classmethod
    def _drop_blank_tags(cls, v: List[str]) -> List[str]:
        return [tag.strip() for tag in v if tag.strip()]

    @field_validator('email', 'phone', 'website', mode='before')
    @classmethod
    def _blank_optional(cls, v: Any) -> Any:
        return blank_to_none(v)

    @field_validator('email')
    @classmethod
    def _check_email(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        check_max_length(v, NAME_LENGTH, 'Email')
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError('Please enter a valid email') from e
        return v

    @field_validator('phone')
    @classmethod
    def _check_phone(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else check_max_length(v, PHONE_LENGTH, 'Phone')

    @field_validator('website')
    @classmethod
    def _check_website(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        check_max_length(v, URL_LENGTH, 'Website')
        try:
            _HTTP_URL.validate_python(v)
        except pydantic.ValidationError as e:
            raise ValueError('Please enter a valid URL') from e
        return v


def validate_venue_input(raw: Mapping[str, Any]) -> VenueDraft:
    return parse_draft(VenueDraft, raw)
