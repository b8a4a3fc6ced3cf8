from enum import Enum


class MediaKind(str, Enum):
    IMAGE = 'image'
    VIDEO = 'video'

    @classmethod
    def from_content_type(cls, content_type: str) -> 'MediaKind':
        # Anything that is not an image is handled as video/other
        if (content_type or '').lower().startswith('image/'):
            return cls.IMAGE
        return cls.VIDEO
