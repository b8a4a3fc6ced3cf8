"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.storage.local_object_storage import LocalObjectStorage
from src.service.catalog.app.cache.entity_list_cache import event_list_cache, venue_list_cache
from src.service.catalog.domain.media_staging import MediaPolicy
from src.service.catalog.driven_adapter.repo.event_command_repo_impl import EventCommandRepoImpl
from src.service.catalog.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.catalog.driven_adapter.repo.user_role_query_repo_impl import (
    UserRoleQueryRepoImpl,
)
from src.service.catalog.driven_adapter.repo.venue_command_repo_impl import VenueCommandRepoImpl
from src.service.catalog.driven_adapter.repo.venue_query_repo_impl import VenueQueryRepoImpl
from src.service.catalog.driven_adapter.storage.media_storage_impl import MediaStorageImpl
from src.service.catalog.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine is created lazily per event loop)
    database = providers.Singleton(Database)

    # Object storage (local filesystem, served under /{MEDIA_BUCKET})
    object_storage = providers.Singleton(LocalObjectStorage)

    # Repositories (stateless - use session_factory per call)
    venue_command_repo = providers.Singleton(
        VenueCommandRepoImpl, session_factory=database.provided.session
    )
    venue_query_repo = providers.Singleton(
        VenueQueryRepoImpl, session_factory=database.provided.session
    )
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    user_role_query_repo = providers.Singleton(
        UserRoleQueryRepoImpl, session_factory=database.provided.session
    )

    # Media
    media_storage = providers.Singleton(
        MediaStorageImpl,
        object_storage=object_storage,
        upsert=config_service.provided.MEDIA_UPSERT,
    )
    media_policy = providers.Singleton(MediaPolicy.from_settings)

    # Process-local list caches (one per entity kind)
    venue_list_cache = providers.Singleton(venue_list_cache)
    event_list_cache = providers.Singleton(event_list_cache)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
