from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.command.submit_venue_use_case import SubmitVenueUseCase
from src.service.catalog.app.query.get_venue_use_case import GetVenueUseCase
from src.service.catalog.app.query.list_media_urls_use_case import ListMediaUrlsUseCase
from src.service.catalog.app.query.list_venues_use_case import ListVenuesUseCase
from src.service.catalog.domain.entity.user_entity import UserEntity
from src.service.catalog.domain.enum.owner_kind import OwnerKind
from src.service.catalog.domain.media_staging import MediaPolicy
from src.service.catalog.driving_adapter.http_controller.auth.role_auth import require_organizer
from src.service.catalog.driving_adapter.http_controller.schema.submission_schema import (
    MediaUrlsResponse,
    SubmissionResponse,
)
from src.service.catalog.driving_adapter.http_controller.schema.venue_schema import (
    VenueResponse,
    VenueSubmissionResponse,
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
async def submit_venue(
    response: Response,
    payload: str = Form('{}'),
    media: Optional[List[UploadFile]] = File(None),
    current_user: UserEntity = Depends(require_organizer),
    media_policy: MediaPolicy = Depends(Provide[Container.media_policy]),
    use_case: SubmitVenueUseCase = Depends(SubmitVenueUseCase.depends),
) -> VenueSubmissionResponse:
    """Create a venue and upload its media; partial upload failures still return 201."""
    raw = parse_payload(payload)
    staging = await stage_uploads(media, media_policy)
    Logger.base.info(f'🏛️  [VENUE] Submission by {current_user.id} with {len(staging)} files')

    result = await use_case.run(raw, staging)

    response.status_code = submission_status_code(result)
    return VenueSubmissionResponse(
        **SubmissionResponse.common_fields(result),
        venue=VenueResponse.from_entity(result.entity) if result.entity else None,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_venues(
    refresh: bool = False,
    use_case: ListVenuesUseCase = Depends(ListVenuesUseCase.depends),
) -> List[VenueResponse]:
    venues = await use_case.list_venues(refresh=refresh)
    return [VenueResponse.from_entity(v) for v in venues]


@router.get('/{venue_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_venue(
    venue_id: str,
    use_case: GetVenueUseCase = Depends(GetVenueUseCase.depends),
) -> VenueResponse:
    return VenueResponse.from_entity(await use_case.get_by_id(venue_id=venue_id))


@router.get('/{venue_id}/media', status_code=status.HTTP_200_OK)
@Logger.io
async def list_venue_media(
    venue_id: str,
    use_case: ListMediaUrlsUseCase = Depends(ListMediaUrlsUseCase.depends),
) -> MediaUrlsResponse:
    urls = await use_case.list_urls(owner_kind=OwnerKind.VENUES, owner_id=venue_id)
    return MediaUrlsResponse(owner_kind=OwnerKind.VENUES.value, owner_id=venue_id, urls=sorted(urls))
