"""Submission outcome DTOs."""

from typing import Generic, List, Optional, TypeVar

import attrs

from src.platform.exception.exceptions import FieldViolation
from src.service.catalog.domain.enum.submission_state import SubmissionState


_E = TypeVar('_E')


@attrs.define(frozen=True)
class UploadOutcome:
    """One staged file after the upload step: a url or an error, never both."""

    filename: str
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.url is not None


@attrs.define
class SubmissionResult(Generic[_E]):
    state: SubmissionState = SubmissionState.IDLE
    history: List[SubmissionState] = attrs.field(factory=list)
    entity: Optional[_E] = None
    failed_step: Optional[SubmissionState] = None
    violations: List[FieldViolation] = attrs.field(factory=list)
    uploads: List[UploadOutcome] = attrs.field(factory=list)
    error: Optional[Exception] = None
    notification: str = ''

    @property
    def succeeded(self) -> bool:
        return self.state == SubmissionState.DONE

    @property
    def media_urls(self) -> List[str]:
        return [u.url for u in self.uploads if u.url is not None]

    @property
    def failed_uploads(self) -> List[UploadOutcome]:
        return [u for u in self.uploads if not u.succeeded]

    def enter(self, state: SubmissionState) -> None:
        self.state = state
        self.history.append(state)
