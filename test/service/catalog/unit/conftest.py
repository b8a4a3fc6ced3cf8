from typing import Any
from unittest.mock import AsyncMock

import pytest

from src.service.catalog.app.cache.entity_list_cache import event_list_cache, venue_list_cache
from src.service.catalog.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.catalog.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.catalog.app.interface.i_media_storage import IMediaStorage
from src.service.catalog.app.interface.i_venue_command_repo import IVenueCommandRepo
from src.service.catalog.app.interface.i_venue_query_repo import IVenueQueryRepo
from src.service.catalog.domain.media_staging import MediaPolicy, MediaStagingArea


@pytest.fixture
def mock_venue_command_repo() -> AsyncMock:
    return AsyncMock(spec=IVenueCommandRepo)


@pytest.fixture
def mock_venue_query_repo() -> AsyncMock:
    return AsyncMock(spec=IVenueQueryRepo)


@pytest.fixture
def mock_event_command_repo() -> AsyncMock:
    return AsyncMock(spec=IEventCommandRepo)


@pytest.fixture
def mock_event_query_repo() -> AsyncMock:
    return AsyncMock(spec=IEventQueryRepo)


@pytest.fixture
def mock_media_storage() -> AsyncMock:
    return AsyncMock(spec=IMediaStorage)


@pytest.fixture
def venue_cache() -> Any:
    return venue_list_cache()


@pytest.fixture
def event_cache() -> Any:
    return event_list_cache()


@pytest.fixture
def media_policy() -> MediaPolicy:
    return MediaPolicy(max_file_size_bytes=1_000, enforce_max_file_size=True)


@pytest.fixture
def staging(media_policy: MediaPolicy) -> MediaStagingArea:
    return MediaStagingArea(policy=media_policy)
