from datetime import datetime, timedelta, timezone

import pytest

from src.service.catalog.app.cache.entity_list_cache import event_list_cache, venue_list_cache
from src.service.catalog.domain.entity.event_entity import Event
from src.service.catalog.domain.entity.venue_entity import Venue


def _venue(name: str) -> Venue:
    return Venue(name=name, address='12 River Road', city='Springfield', zip_code='12345', capacity=10)


def _event(name: str, start: datetime) -> Event:
    return Event(
        name=name,
        description='An evening of live music',
        start_date=start,
        end_date=start + timedelta(hours=2),
        venue_id='venue-1',
    )


@pytest.mark.unit
class TestEntityListCache:
    def test_starts_unloaded(self) -> None:
        # Act
        cache = venue_list_cache()

        # Assert
        assert not cache.is_loaded
        assert cache.items() == []

    def test_venues_sorted_by_name(self) -> None:
        # Arrange
        cache = venue_list_cache()
        cache.replace([_venue('Zeta Hall'), _venue('Alpha Hall')])

        # Act
        cache.append(_venue('Mid Hall'))

        # Assert
        assert cache.is_loaded
        assert [v.name for v in cache.items()] == ['Alpha Hall', 'Mid Hall', 'Zeta Hall']

    def test_events_sorted_by_start_date(self) -> None:
        # Arrange
        base = datetime(2030, 1, 1, tzinfo=timezone.utc)
        cache = event_list_cache()

        # Act
        cache.replace([_event('later', base + timedelta(days=2)), _event('sooner', base)])
        cache.append(_event('middle', base + timedelta(days=1)))

        # Assert
        assert [e.name for e in cache.items()] == ['sooner', 'middle', 'later']

    def test_items_is_a_copy(self) -> None:
        # Arrange
        cache = venue_list_cache()
        cache.replace([_venue('Alpha Hall')])

        # Act
        cache.items().clear()

        # Assert
        assert len(cache) == 1

    def test_invalidate(self) -> None:
        # Arrange
        cache = venue_list_cache()
        cache.replace([_venue('Alpha Hall')])

        # Act
        cache.invalidate()

        # Assert
        assert not cache.is_loaded
        assert len(cache) == 0
