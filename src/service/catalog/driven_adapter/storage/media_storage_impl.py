"""
Media storage adapter: owner-scoped paths on top of the object storage.
"""

from typing import Set

from src.platform.exception.exceptions import UploadError
from src.platform.logging.loguru_io import Logger
from src.platform.storage.local_object_storage import LocalObjectStorage
from src.service.catalog.app.interface.i_media_storage import IMediaStorage
from src.service.catalog.domain.enum.owner_kind import OwnerKind
from src.service.catalog.domain.value_object.media_path import MediaPath, owner_prefix
from src.service.catalog.domain.value_object.staged_file import StagedFile


class MediaStorageImpl(IMediaStorage):
    def __init__(self, *, object_storage: LocalObjectStorage, upsert: bool = False) -> None:
        self.object_storage = object_storage
        self.upsert = upsert

    @Logger.io
    async def upload(self, *, owner_kind: OwnerKind, owner_id: str, file: StagedFile) -> str:
        path = MediaPath.generate(owner_kind, owner_id, file.filename)
        try:
            stored = await self.object_storage.upload(
                str(path), file.data, content_type=file.content_type, upsert=self.upsert
            )
        except UploadError as e:
            raise UploadError(f'Failed to upload {file.filename}: {e.message}', filename=file.filename) from e
        return self.object_storage.get_public_url(stored)

    @Logger.io
    async def list_urls(self, *, owner_kind: OwnerKind, owner_id: str) -> Set[str]:
        paths = await self.object_storage.list(owner_prefix(owner_kind, owner_id))
        return {self.object_storage.get_public_url(p) for p in paths}
