from enum import Enum


class UserRole(str, Enum):
    ADMIN = 'admin'
    ORGANIZER = 'organizer'
    ATTENDEE = 'attendee'


LISTING_MANAGER_ROLES = frozenset({UserRole.ADMIN, UserRole.ORGANIZER})
