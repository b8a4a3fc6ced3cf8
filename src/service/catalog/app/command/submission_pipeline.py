"""
Submission Pipeline

One user action (submit the venue/event form) runs through:

    IDLE -> VALIDATING -> CREATING_ENTITY -> UPLOADING_MEDIA
         -> UPDATING_ENTITY_WITH_MEDIA -> DONE

with FAILED reachable from every step. Steps that already succeeded are never
rolled back:
- a failed upload leaves the entity in place and only the successful URLs are attached
- a failed media update leaves the entity and the stored files in place

Errors never escape `run`; they end up in SubmissionResult.notification.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar

import anyio

from src.platform.exception.exceptions import (
    CustomBaseError,
    OutOfRangeError,
    PersistenceError,
    ReferentialError,
    ValidationError,
)
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.cache.entity_list_cache import EntityListCache
from src.service.catalog.app.dto.submission_result import SubmissionResult, UploadOutcome
from src.service.catalog.app.interface.i_media_storage import IMediaStorage
from src.service.catalog.domain.enum.owner_kind import OwnerKind
from src.service.catalog.domain.enum.submission_state import SubmissionState
from src.service.catalog.domain.media_staging import MediaStagingArea
from src.service.catalog.domain.value_object.staged_file import StagedFile


_D = TypeVar('_D')
_E = TypeVar('_E')


class SubmissionPipeline(ABC, Generic[_D, _E]):
    owner_kind: OwnerKind
    entity_label: str

    def __init__(self, *, media_storage: IMediaStorage, cache: EntityListCache[_E]) -> None:
        self.media_storage = media_storage
        self.cache = cache

    # ---- entity specific steps ----

    @abstractmethod
    def validate(self, raw: Mapping[str, Any]) -> _D: ...

    @abstractmethod
    async def create_entity(self, draft: _D) -> _E: ...

    @abstractmethod
    async def attach_media(self, entity: _E, media_urls: List[str]) -> _E: ...

    @abstractmethod
    def entity_id(self, entity: _E) -> str: ...

    # ---- orchestration ----

    @Logger.io
    async def run(
        self, raw: Mapping[str, Any], staging: Optional[MediaStagingArea] = None
    ) -> SubmissionResult[_E]:
        result: SubmissionResult[_E] = SubmissionResult()
        result.enter(SubmissionState.IDLE)
        staged = staging.files if staging is not None else []

        # 1. Validate before any backend call
        result.enter(SubmissionState.VALIDATING)
        try:
            draft = self.validate(raw)
        except ValidationError as e:
            result.violations = e.violations
            fields = ', '.join(sorted(e.fields()))
            return self._fail(result, e, f'Please fix the highlighted fields: {fields}')

        # 2. Create the entity
        result.enter(SubmissionState.CREATING_ENTITY)
        try:
            entity = await self.create_entity(draft)
        except (ReferentialError, OutOfRangeError) as e:
            return self._fail(result, e, f'Could not create {self.entity_label}: {e.message}')
        except PersistenceError as e:
            return self._fail(result, e, f'Could not create {self.entity_label}, please try again')
        result.entity = entity
        entity_id = self.entity_id(entity)
        Logger.base.info(f'✅ [SUBMIT] Created {self.entity_label} {entity_id}')

        # 3. Upload staged media concurrently
        if staged:
            result.enter(SubmissionState.UPLOADING_MEDIA)
            result.uploads = await self._upload_all(entity_id, staged)

        # 4. Attach the successful URLs, in staged order
        if result.media_urls:
            result.enter(SubmissionState.UPDATING_ENTITY_WITH_MEDIA)
            try:
                result.entity = await self.attach_media(entity, result.media_urls)
            except CustomBaseError as e:
                # The entity exists without its media
                self.cache.append(entity)
                return self._fail(
                    result,
                    e,
                    f'{self.entity_label.capitalize()} was created but its media could not be saved',
                )

        # 5. Done: publish to the list cache and reset staging
        result.enter(SubmissionState.DONE)
        self.cache.append(result.entity)  # type: ignore[arg-type]
        if staging is not None:
            staging.clear()
        result.notification = self._done_notification(result)
        return result

    async def _upload_all(self, owner_id: str, staged: List[StagedFile]) -> List[UploadOutcome]:
        outcomes: List[Optional[UploadOutcome]] = [None] * len(staged)

        async def upload_one(index: int, file: StagedFile) -> None:
            try:
                url = await self.media_storage.upload(
                    owner_kind=self.owner_kind, owner_id=owner_id, file=file
                )
                outcomes[index] = UploadOutcome(filename=file.filename, url=url)
            except CustomBaseError as e:
                # Sibling uploads keep going
                outcomes[index] = UploadOutcome(filename=file.filename, error=e.message)
            except Exception as e:
                # An unexpected storage failure must not cancel the task group
                Logger.base.opt(exception=e).error(
                    f'💥 [UPLOAD] Unexpected {type(e).__name__} uploading {file.filename}'
                )
                outcomes[index] = UploadOutcome(filename=file.filename, error=str(e) or type(e).__name__)

        async with anyio.create_task_group() as tg:
            for index, file in enumerate(staged):
                tg.start_soon(upload_one, index, file)

        return [outcome for outcome in outcomes if outcome is not None]

    def _fail(
        self, result: SubmissionResult[_E], error: CustomBaseError, notification: str
    ) -> SubmissionResult[_E]:
        result.failed_step = result.state
        result.error = error
        result.notification = notification
        result.enter(SubmissionState.FAILED)
        Logger.base.warning(
            f'⚠️ [SUBMIT] {self.entity_label} submission failed at {result.failed_step.value}: {error.message}'
        )
        return result

    def _done_notification(self, result: SubmissionResult[_E]) -> str:
        label = self.entity_label.capitalize()
        failed = result.failed_uploads
        if not failed:
            return f'{label} created successfully'
        names = ', '.join(u.filename for u in failed)
        return f'{label} created, but {len(failed)} of {len(result.uploads)} files failed to upload: {names}'
