"""
Path-addressed object storage on the local filesystem.

Objects live under `{MEDIA_ROOT}/{bucket}/{path}` and are served back over HTTP
by the StaticFiles mount registered in app_factory, so the public URL of an
object is `{MEDIA_PUBLIC_BASE_URL}/{bucket}/{path}`.
"""

from typing import List, Optional

import anyio

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError, UploadError
from src.platform.logging.loguru_io import Logger


class LocalObjectStorage:
    def __init__(
        self,
        *,
        root: Optional[str] = None,
        bucket: Optional[str] = None,
        public_base_url: Optional[str] = None,
    ) -> None:
        self.bucket = bucket or settings.MEDIA_BUCKET
        self.root = anyio.Path(root or settings.MEDIA_ROOT) / self.bucket
        self.public_base_url = (public_base_url or settings.MEDIA_PUBLIC_BASE_URL).rstrip('/')

    def _resolve(self, path: str) -> anyio.Path:
        relative = path.strip('/')
        if not relative or '..' in relative.split('/'):
            raise DomainError(f'Invalid object path: {path!r}')
        return self.root / relative

    @Logger.io(truncate_content=True)
    async def upload(
        self, path: str, data: bytes, *, content_type: str = '', upsert: bool = False
    ) -> str:
        """Write `data` at `path` and return the stored path."""
        target = self._resolve(path)
        try:
            if not upsert and await target.exists():
                raise UploadError(f'Object already exists: {path}', filename=target.name)
            await target.parent.mkdir(parents=True, exist_ok=True)
            async with await anyio.open_file(target, 'wb') as f:
                await f.write(data)
        except UploadError:
            raise
        except OSError as e:
            raise UploadError(f'Failed to store {path}: {e}', filename=target.name) from e

        Logger.base.info(f'📦 [STORAGE] Stored {path} ({len(data)} bytes, {content_type or "?"})')
        return path

    @Logger.io
    async def list(self, prefix: str) -> List[str]:
        """List object paths directly under `prefix`, sorted by name."""
        directory = self._resolve(prefix)
        if not await directory.is_dir():
            return []

        base = prefix.strip('/')
        names = [entry.name async for entry in directory.iterdir() if await entry.is_file()]
        return [f'{base}/{name}' for name in sorted(names)]

    def get_public_url(self, path: str) -> str:
        return f'{self.public_base_url}/{self.bucket}/{path.strip("/")}'
