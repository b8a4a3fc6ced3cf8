import attrs

from src.service.catalog.domain.enum.media_kind import MediaKind


def _bytes_repr(data: bytes) -> str:
    return f'<{len(data)} bytes>'


@attrs.define(frozen=True)
class LocalFile:
    """A file picked by the user, not yet staged."""

    filename: str
    content_type: str
    data: bytes = attrs.field(repr=_bytes_repr)

    @property
    def size(self) -> int:
        return len(self.data)


@attrs.define(frozen=True)
class StagedFile:
    filename: str
    content_type: str
    data: bytes = attrs.field(repr=_bytes_repr)
    kind: MediaKind
    preview_handle: str

    @property
    def size(self) -> int:
        return len(self.data)
