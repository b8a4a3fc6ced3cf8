"""
Shared plumbing for the venue/event input schemas.

Drafts are pydantic models; every rule failure is reported as a FieldViolation
so the caller gets the full list at once instead of the first problem.
"""

from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Mapping, Type, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict

from src.platform.exception.exceptions import FieldViolation, ValidationError


_M = TypeVar('_M', bound='DraftModel')

# Largest values the catalog columns hold: Integer and Numeric(10, 2)
MAX_INTEGER = 2_147_483_647
MAX_AMOUNT = Decimal('99999999.99')

# String(n) widths of the catalog columns
ID_LENGTH = 36
NAME_LENGTH = 255
ADDRESS_LENGTH = 500
ZIP_CODE_LENGTH = 20
PHONE_LENGTH = 50
URL_LENGTH = 500

_NUMBER_ERRORS = {
    'int_parsing',
    'int_type',
    'int_from_float',
    'float_parsing',
    'float_type',
    'decimal_parsing',
    'decimal_type',
    'finite_number',
}


class DraftModel(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra='ignore',
    )

    # field -> message used when the value is absent or not parseable at all
    REQUIRED_MESSAGES: ClassVar[Dict[str, str]] = {}


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _label(field: str) -> str:
    return field.replace('_', ' ').capitalize()


def _message(model: Type[DraftModel], field: str, error: Mapping[str, Any]) -> str:
    error_type = error['type']
    if error_type == 'value_error':
        cause = error.get('ctx', {}).get('error')
        return str(cause) if cause is not None else error['msg']
    if error_type in ('missing', 'none_required') or error_type.startswith('datetime'):
        return model.REQUIRED_MESSAGES.get(field, f'{_label(field)} is required')
    if error_type in _NUMBER_ERRORS:
        return f'{_label(field)} must be a number'
    return error['msg']


def to_violations(model: Type[DraftModel], error: pydantic.ValidationError) -> List[FieldViolation]:
    violations = []
    for item in error.errors():
        loc = item.get('loc') or ('__root__',)
        field = '.'.join(str(part) for part in loc)
        violations.append(FieldViolation(field=field, message=_message(model, field, item)))
    return violations


def parse_draft(model: Type[_M], raw: Mapping[str, Any]) -> _M:
    """Validate `raw` into `model`, raising ValidationError with every violation."""
    if not isinstance(raw, Mapping):
        raise ValidationError([FieldViolation(field='__root__', message='Input must be an object')])
    try:
        return model.model_validate(dict(raw))
    except pydantic.ValidationError as e:
        raise ValidationError(to_violations(model, e)) from e


def check_max_length(value: str, length: int, label: str) -> str:
    if len(value) > length:
        raise ValueError(f'{label} must be at most {length} characters')
    return value
