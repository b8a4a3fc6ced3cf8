from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.service.catalog.app.interface.i_user_role_query_repo import IUserRoleQueryRepo
from src.service.catalog.domain.entity.user_entity import UserEntity
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import (
    JwtAuth,
    extract_bearer_token,
)


class RoleAuthStrategy:
    @staticmethod
    def can_manage_listings(user: UserEntity) -> bool:
        return user.can_manage_listings


@inject
async def get_current_user(
    authorization: Optional[str] = Header(None),
    cookie_token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    user_role_query_repo: IUserRoleQueryRepo = Depends(Provide[Container.user_role_query_repo]),
) -> UserEntity:
    user_id = jwt_auth.get_user_id_from_jwt(extract_bearer_token(authorization, cookie_token))
    roles = await user_role_query_repo.get_roles(user_id=user_id)
    return UserEntity(id=user_id, roles=roles)


async def require_organizer(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    """Admins and organizers may create venues and events."""
    if not RoleAuthStrategy.can_manage_listings(current_user):
        raise ForbiddenError('Only organizers can perform this action')
    return current_user
