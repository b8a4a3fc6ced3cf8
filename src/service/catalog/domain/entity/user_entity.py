from typing import FrozenSet

import attrs

from src.service.catalog.domain.enum.user_role import LISTING_MANAGER_ROLES, UserRole


@attrs.define(frozen=True)
class UserEntity:
    """The caller as seen by this service: identity-provider id plus user_roles rows."""

    id: str
    roles: FrozenSet[UserRole] = attrs.field(factory=frozenset, converter=frozenset)

    @property
    def can_manage_listings(self) -> bool:
        return bool(self.roles & LISTING_MANAGER_ROLES)
