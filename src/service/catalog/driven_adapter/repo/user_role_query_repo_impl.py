from typing import Set

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_user_role_query_repo import IUserRoleQueryRepo
from src.service.catalog.domain.enum.user_role import UserRole
from src.service.catalog.driven_adapter.model.user_role_model import UserRoleModel
from src.service.catalog.driven_adapter.repo.db_error_translator import translate_db_errors
from src.service.catalog.driven_adapter.repo.session_mixin import SessionFactoryMixin


class UserRoleQueryRepoImpl(SessionFactoryMixin, IUserRoleQueryRepo):
    @Logger.io
    async def get_roles(self, *, user_id: str) -> Set[UserRole]:
        async with translate_db_errors('load user roles'):
            async with self._get_session() as session:
                result = await session.execute(
                    select(UserRoleModel.role).where(UserRoleModel.user_id == user_id)
                )
                raw_roles = result.scalars().all()

        roles = set()
        for raw in raw_roles:
            try:
                roles.add(UserRole(raw))
            except ValueError:
                Logger.base.warning(f'⚠️ [AUTH] Ignoring unknown role {raw!r} for user {user_id}')
        return roles
