from pathlib import PurePosixPath

import attrs
import uuid_utils

from src.service.catalog.domain.enum.owner_kind import OwnerKind


def owner_prefix(owner_kind: OwnerKind, owner_id: str) -> str:
    return f'{owner_kind.value}/{owner_id}'


@attrs.define(frozen=True)
class MediaPath:
    """Storage path `{owner_kind}/{owner_id}/{file_name}` of one media asset."""

    owner_kind: OwnerKind
    owner_id: str
    file_name: str

    @classmethod
    def generate(cls, owner_kind: OwnerKind, owner_id: str, original_filename: str) -> 'MediaPath':
        """Time-ordered UUIDv7 name keeping the original (lowercased) extension."""
        extension = PurePosixPath(original_filename or '').suffix.lower()
        return cls(
            owner_kind=owner_kind,
            owner_id=owner_id,
            file_name=f'{uuid_utils.uuid7().hex}{extension}',
        )

    @property
    def prefix(self) -> str:
        return owner_prefix(self.owner_kind, self.owner_id)

    def __str__(self) -> str:
        return f'{self.prefix}/{self.file_name}'
