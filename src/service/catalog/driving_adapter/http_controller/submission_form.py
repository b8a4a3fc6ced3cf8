"""
Multipart submission helpers shared by the venue and event controllers.

A submission is `payload` (JSON object as a form field) plus zero or more
`media` files.
"""

from typing import Any, Dict, List, Optional

from fastapi import UploadFile, status
import orjson

from src.platform.exception.exceptions import CustomBaseError, FieldViolation, ValidationError
from src.service.catalog.app.dto.submission_result import SubmissionResult
from src.service.catalog.domain.enum.submission_state import SubmissionState
from src.service.catalog.domain.media_staging import MediaPolicy, MediaStagingArea
from src.service.catalog.domain.value_object.staged_file import LocalFile


def parse_payload(payload: str) -> Dict[str, Any]:
    try:
        data = orjson.loads(payload or '{}')
    except orjson.JSONDecodeError as e:
        raise ValidationError(
            [FieldViolation(field='payload', message='Payload must be valid JSON')]
        ) from e
    if not isinstance(data, dict):
        raise ValidationError([FieldViolation(field='payload', message='Payload must be a JSON object')])
    return data


async def stage_uploads(media: Optional[List[UploadFile]], policy: MediaPolicy) -> MediaStagingArea:
    staging = MediaStagingArea(policy=policy)
    files = [
        LocalFile(
            filename=upload.filename or 'upload',
            content_type=upload.content_type or 'application/octet-stream',
            data=await upload.read(),
        )
        for upload in media or []
    ]
    if files:
        staging.add(files)
    return staging


def submission_status_code(result: SubmissionResult[Any]) -> int:
    if result.succeeded:
        return status.HTTP_201_CREATED
    if result.failed_step == SubmissionState.UPDATING_ENTITY_WITH_MEDIA:
        # Entity exists, media could not be attached
        return status.HTTP_502_BAD_GATEWAY
    if isinstance(result.error, CustomBaseError):
        return result.error.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
