from typing import Any, Sequence

import attrs


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def detail(self) -> Any:
        return self.message


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


@attrs.define(frozen=True)
class FieldViolation:
    field: str
    message: str


class ValidationError(CustomBaseError):
    """Field-scoped input problems; the user must correct the input."""

    def __init__(self, violations: Sequence[FieldViolation]) -> None:
        self.violations = list(violations)
        fields = ', '.join(v.field for v in self.violations)
        super().__init__(f'Invalid input: {fields}', 422)

    @property
    def detail(self) -> Any:
        return [attrs.asdict(v) for v in self.violations]

    def fields(self) -> set[str]:
        return {v.field for v in self.violations}


class PersistenceError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 503) -> None:
        super().__init__(message, status_code)


class ReferentialError(PersistenceError):
    """A referenced row (e.g. the event's venue) does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class OutOfRangeError(PersistenceError):
    """A value is too large or too long for its column."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class UploadError(CustomBaseError):
    def __init__(self, message: str, *, filename: str = '') -> None:
        self.filename = filename
        super().__init__(message, 502)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)
