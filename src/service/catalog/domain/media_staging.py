"""
Media Staging

In-memory holding area for files the user picked before the owning entity
exists. Each staged file gets a preview handle (the server-side counterpart of
a browser object URL) that must be released when the file leaves the area.
"""

from typing import Dict, Iterable, List, Optional

import attrs
import uuid_utils

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError, FieldViolation, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.catalog.domain.enum.media_kind import MediaKind
from src.service.catalog.domain.value_object.staged_file import LocalFile, StagedFile


@attrs.define(frozen=True)
class MediaPolicy:
    max_file_size_bytes: int = 5_000_000
    enforce_max_file_size: bool = True

    @classmethod
    def from_settings(cls) -> 'MediaPolicy':
        return cls(
            max_file_size_bytes=settings.MEDIA_MAX_FILE_SIZE_BYTES,
            enforce_max_file_size=settings.MEDIA_ENFORCE_MAX_FILE_SIZE,
        )

    def violations(self, files: Iterable[LocalFile]) -> List[FieldViolation]:
        if not self.enforce_max_file_size:
            return []
        limit_mb = self.max_file_size_bytes / 1_000_000
        return [
            FieldViolation(
                field='media',
                message=f'{f.filename} is larger than the {limit_mb:g}MB limit',
            )
            for f in files
            if f.size > self.max_file_size_bytes
        ]


class PreviewRegistry:
    """Allocates and releases preview handles for staged files."""

    def __init__(self) -> None:
        self._previews: Dict[str, LocalFile] = {}

    def allocate(self, file: LocalFile) -> str:
        handle = f'preview:{uuid_utils.uuid7()}'
        self._previews[handle] = file
        return handle

    def release(self, handle: str) -> None:
        self._previews.pop(handle, None)

    def resolve(self, handle: str) -> Optional[LocalFile]:
        return self._previews.get(handle)

    def is_active(self, handle: str) -> bool:
        return handle in self._previews

    @property
    def active_count(self) -> int:
        return len(self._previews)


class MediaStagingArea:
    def __init__(
        self,
        policy: Optional[MediaPolicy] = None,
        previews: Optional[PreviewRegistry] = None,
    ) -> None:
        self.policy = policy or MediaPolicy.from_settings()
        self.previews = previews or PreviewRegistry()
        self._files: List[StagedFile] = []

    @property
    def files(self) -> List[StagedFile]:
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def add(self, files: Iterable[LocalFile]) -> List[StagedFile]:
        """
        Stage files in the given order.

        With an enforced policy, one oversized file rejects the whole batch
        (ValidationError on field "media") and nothing is staged.
        """
        batch = list(files)
        if violations := self.policy.violations(batch):
            raise ValidationError(violations)

        staged = [
            StagedFile(
                filename=f.filename,
                content_type=f.content_type,
                data=f.data,
                kind=MediaKind.from_content_type(f.content_type),
                preview_handle=self.previews.allocate(f),
            )
            for f in batch
        ]
        self._files.extend(staged)
        return staged

    def remove(self, index: int) -> StagedFile:
        if not 0 <= index < len(self._files):
            raise DomainError(f'No staged file at index {index}')
        removed = self._files.pop(index)
        self.previews.release(removed.preview_handle)
        return removed

    def clear(self) -> None:
        for staged in self._files:
            self.previews.release(staged.preview_handle)
        if self._files:
            Logger.base.info(f'🧹 [STAGING] Released {len(self._files)} staged files')
        self._files.clear()
