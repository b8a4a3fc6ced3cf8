from abc import ABC, abstractmethod
from typing import Set

from src.service.catalog.domain.enum.user_role import UserRole


class IUserRoleQueryRepo(ABC):
    @abstractmethod
    async def get_roles(self, *, user_id: str) -> Set[UserRole]:
        pass
