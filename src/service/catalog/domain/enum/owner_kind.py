from enum import Enum


class OwnerKind(str, Enum):
    """First segment of a media storage path."""

    VENUES = 'venues'
    EVENTS = 'events'
