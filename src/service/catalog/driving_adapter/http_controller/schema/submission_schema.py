from typing import Any, List, Optional

from pydantic import BaseModel

from src.service.catalog.app.dto.submission_result import SubmissionResult


class FieldViolationResponse(BaseModel):
    field: str
    message: str


class UploadOutcomeResponse(BaseModel):
    filename: str
    url: Optional[str] = None
    error: Optional[str] = None


class SubmissionResponse(BaseModel):
    """Common part of the venue/event submission responses."""

    state: str
    history: List[str]
    failed_step: Optional[str] = None
    notification: str
    violations: List[FieldViolationResponse] = []
    uploads: List[UploadOutcomeResponse] = []
    failed_uploads: List[UploadOutcomeResponse] = []

    @staticmethod
    def common_fields(result: SubmissionResult[Any]) -> dict[str, Any]:
        return {
            'state': result.state.value,
            'history': [s.value for s in result.history],
            'failed_step': result.failed_step.value if result.failed_step else None,
            'notification': result.notification,
            'violations': [
                FieldViolationResponse(field=v.field, message=v.message) for v in result.violations
            ],
            'uploads': [
                UploadOutcomeResponse(filename=u.filename, url=u.url, error=u.error)
                for u in result.uploads
            ],
            'failed_uploads': [
                UploadOutcomeResponse(filename=u.filename, url=u.url, error=u.error)
                for u in result.failed_uploads
            ],
        }


class MediaUrlsResponse(BaseModel):
    owner_kind: str
    owner_id: str
    urls: List[str]
