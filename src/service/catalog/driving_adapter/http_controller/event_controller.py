from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.submit_event_use_case import SubmitEventUseCase
from src.service.catalog.app.query.get_event_use_case import GetEventUseCase
from src.service.catalog.app.query.list_events_use_case import ListEventsUseCase
from src.service.catalog.app.query.list_media_urls_use_case import ListMediaUrlsUseCase
from src.service.catalog.domain.entity.user_entity import UserEntity
from src.service.catalog.domain.enum.owner_kind import OwnerKind
from src.service.catalog.domain.media_staging import MediaPolicy
from src.service.catalog.driving_adapter.http_controller.auth.role_auth import require_organizer
from src.service.catalog.driving_adapter.http_controller.schema.event_schema import (
    EventResponse,
    EventSubmissionResponse,
)
from src.service.catalog.driving_adapter.http_controller.schema.submission_schema import (
    MediaUrlsResponse,
    SubmissionResponse,
)
from src.service.catalog.driving_adapter.http_controller.submission_form import (
    parse_payload,
    stage_uploads,
    submission_status_code,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def submit_event(
    response: Response,
    payload: str = Form('{}'),
    media: Optional[List[UploadFile]] = File(None),
    current_user: UserEntity = Depends(require_organizer),
    media_policy: MediaPolicy = Depends(Provide[Container.media_policy]),
    use_case: SubmitEventUseCase = Depends(SubmitEventUseCase.depends),
) -> EventSubmissionResponse:
    raw = parse_payload(payload)
    staging = await stage_uploads(media, media_policy)
    Logger.base.info(f'🎫 [EVENT] Submission by {current_user.id} with {len(staging)} files')

    result = await use_case.run(raw, staging)

    response.status_code = submission_status_code(result)
    return EventSubmissionResponse(
        **SubmissionResponse.common_fields(result),
        event=EventResponse.from_entity(result.entity) if result.entity else None,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    refresh: bool = False,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_events(refresh=refresh)
    return [EventResponse.from_entity(e) for e in events]


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: str,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    return EventResponse.from_entity(await use_case.get_by_id(event_id=event_id))


@router.get('/{event_id}/media', status_code=status.HTTP_200_OK)
@Logger.io
async def list_event_media(
    event_id: str,
    use_case: ListMediaUrlsUseCase = Depends(ListMediaUrlsUseCase.depends),
) -> MediaUrlsResponse:
    urls = await use_case.list_urls(owner_kind=OwnerKind.EVENTS, owner_id=event_id)
    return MediaUrlsResponse(owner_kind=OwnerKind.EVENTS.value, owner_id=event_id, urls=sorted(urls))
