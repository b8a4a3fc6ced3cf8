from abc import ABC, abstractmethod
from typing import Set

from src.service.catalog.domain.enum.owner_kind import OwnerKind
from src.service.catalog.domain.value_object.staged_file import StagedFile


class IMediaStorage(ABC):
    @abstractmethod
    async def upload(self, *, owner_kind: OwnerKind, owner_id: str, file: StagedFile) -> str:
        """Store one file under the owner's prefix and return its public URL (UploadError on failure)."""
        pass

    @abstractmethod
    async def list_urls(self, *, owner_kind: OwnerKind, owner_id: str) -> Set[str]:
        pass
