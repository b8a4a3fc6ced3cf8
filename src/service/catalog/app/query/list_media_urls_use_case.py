from typing import Self, Set

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_media_storage import IMediaStorage
from src.service.catalog.domain.enum.owner_kind import OwnerKind


class ListMediaUrlsUseCase:
    def __init__(self, media_storage: IMediaStorage) -> None:
        self.media_storage = media_storage

    @classmethod
    @inject
    def depends(
        cls, media_storage: IMediaStorage = Depends(Provide[Container.media_storage])
    ) -> Self:
        return cls(media_storage=media_storage)

    @Logger.io
    async def list_urls(self, *, owner_kind: OwnerKind, owner_id: str) -> Set[str]:
        return await self.media_storage.list_urls(owner_kind=owner_kind, owner_id=owner_id)
