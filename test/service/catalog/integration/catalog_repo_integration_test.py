"""
Integration tests for the catalog repositories against SQLite (foreign keys on).
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.exception.exceptions import PersistenceError, ReferentialError
from src.service.catalog.app.dto.event_draft import validate_event_input
from src.service.catalog.app.dto.venue_draft import validate_venue_input
from src.service.catalog.domain.enum.user_role import UserRole
from src.service.catalog.driven_adapter.repo.event_command_repo_impl import EventCommandRepoImpl
from src.service.catalog.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.catalog.driven_adapter.repo.user_role_query_repo_impl import UserRoleQueryRepoImpl
from src.service.catalog.driven_adapter.repo.venue_command_repo_impl import VenueCommandRepoImpl
from src.service.catalog.driven_adapter.repo.venue_query_repo_impl import VenueQueryRepoImpl
from test.service.catalog.fixtures import build_event_payload, build_venue_payload


MISSING_ID = '0192f3a4-0000-7000-8000-000000000000'


@pytest.mark.integration
class TestVenueRepos:
    @pytest.mark.asyncio
    async def test_create_and_read_back(self, database: Database) -> None:
        # Arrange
        command_repo = VenueCommandRepoImpl(session_factory=database.session)
        query_repo = VenueQueryRepoImpl(session_factory=database.session)
        draft = validate_venue_input(build_venue_payload(email='hello@riverside-hall.com'))

        # Act
        created = await command_repo.create_venue(draft=draft)
        loaded = await query_repo.get_by_id(venue_id=created.id)  # type: ignore[arg-type]

        # Assert
        assert created.id is not None
        assert loaded is not None
        assert loaded.name == draft.name
        assert loaded.description == ['outdoor', 'accessible']
        assert loaded.rental_rate_per_hour == 80
        assert loaded.email == 'hello@riverside-hall.com'
        assert loaded.media_urls == []
        assert loaded.is_active
        assert loaded.created_at is not None and loaded.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_list_orders_by_name(self, database: Database) -> None:
        # Arrange
        command_repo = VenueCommandRepoImpl(session_factory=database.session)
        for name in ('Zeta Hall', 'Alpha Hall', 'Mid Hall'):
            await command_repo.create_venue(draft=validate_venue_input(build_venue_payload(name=name)))

        # Act
        venues = await VenueQueryRepoImpl(session_factory=database.session).list_venues()

        # Assert
        assert [v.name for v in venues] == ['Alpha Hall', 'Mid Hall', 'Zeta Hall']

    @pytest.mark.asyncio
    async def test_update_media_urls(self, database: Database) -> None:
        # Arrange
        command_repo = VenueCommandRepoImpl(session_factory=database.session)
        venue = await command_repo.create_venue(draft=validate_venue_input(build_venue_payload()))
        urls = ['http://testserver/media/venues/a.png', 'http://testserver/media/venues/b.png']

        # Act
        updated = await command_repo.update_media_urls(venue_id=venue.id, media_urls=urls)  # type: ignore[arg-type]

        # Assert
        assert updated.media_urls == urls
        reloaded = await VenueQueryRepoImpl(session_factory=database.session).get_by_id(
            venue_id=venue.id  # type: ignore[arg-type]
        )
        assert reloaded is not None and reloaded.media_urls == urls

    @pytest.mark.asyncio
    async def test_update_missing_venue(self, database: Database) -> None:
        with pytest.raises(PersistenceError):
            await VenueCommandRepoImpl(session_factory=database.session).update_media_urls(
                venue_id=MISSING_ID, media_urls=[]
            )

    @pytest.mark.asyncio
    async def test_get_missing_venue_is_none(self, database: Database) -> None:
        assert await VenueQueryRepoImpl(session_factory=database.session).get_by_id(venue_id=MISSING_ID) is None


@pytest.mark.integration
class TestEventRepos:
    @pytest.fixture
    async def venue_id(self, database: Database) -> str:
        venue = await VenueCommandRepoImpl(session_factory=database.session).create_venue(
            draft=validate_venue_input(build_venue_payload())
        )
        assert venue.id is not None
        return venue.id

    @pytest.mark.asyncio
    async def test_create_event_with_default_ticket_type_and_add_ons(
        self,
        database: Database,
        venue_id: str,
        execute_sql_statement: Callable[..., Any],
    ) -> None:
        """
        Given: An existing venue and two add-ons
        When: Creating an event linking both add-ons, one with a price override
        Then: The event is returned expanded with its venue, default ticket type and add-ons
        """
        # Arrange
        for add_on_id, name, price in (('add-on-parking', 'Parking', 12.5), ('add-on-merch', 'Merch', 20)):
            execute_sql_statement(
                'INSERT INTO add_ons (id, name, description, price) VALUES (:id, :name, :description, :price)',
                {'id': add_on_id, 'name': name, 'description': '', 'price': price},
            )
        draft = validate_event_input(
            build_event_payload(
                venue_id,
                add_ons=[{'add_on_id': 'add-on-parking'}, {'add_on_id': 'add-on-merch', 'price': '15'}],
            )
        )

        # Act
        event = await EventCommandRepoImpl(session_factory=database.session).create_event(draft=draft)

        # Assert
        assert event.venue is not None and event.venue.id == venue_id
        assert [(t.name, t.price, t.quantity_available) for t in event.ticket_types] == [
            ('General Admission', Decimal('25'), 200)
        ]
        prices = {a.add_on_id: a.effective_price for a in event.add_ons}
        assert prices == {'add-on-parking': Decimal('12.5'), 'add-on-merch': Decimal('15')}
        assert event.start_date == datetime(2030, 5, 1, 19, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_unknown_venue_is_referential_error(self, database: Database) -> None:
        # Arrange
        draft = validate_event_input(build_event_payload(MISSING_ID))

        # Act & Assert
        with pytest.raises(ReferentialError) as exc_info:
            await EventCommandRepoImpl(session_factory=database.session).create_event(draft=draft)
        assert exc_info.value.message == f'Venue {MISSING_ID} does not exist'
        assert await EventQueryRepoImpl(session_factory=database.session).list_events() == []

    @pytest.mark.asyncio
    async def test_list_events_by_start_date(self, database: Database, venue_id: str) -> None:
        # Arrange
        command_repo = EventCommandRepoImpl(session_factory=database.session)
        for name, day in (('June Gala', '2030-06-01'), ('May Fair', '2030-05-01')):
            await command_repo.create_event(
                draft=validate_event_input(
                    build_event_payload(
                        venue_id,
                        name=name,
                        start_date=f'{day}T19:00:00Z',
                        end_date=f'{day}T22:00:00Z',
                    )
                )
            )

        # Act
        events = await EventQueryRepoImpl(session_factory=database.session).list_events()

        # Assert
        assert [e.name for e in events] == ['May Fair', 'June Gala']
        assert all(e.venue is not None and len(e.ticket_types) == 1 for e in events)

    @pytest.mark.asyncio
    async def test_update_event_media_urls(self, database: Database, venue_id: str) -> None:
        # Arrange
        command_repo = EventCommandRepoImpl(session_factory=database.session)
        event = await command_repo.create_event(draft=validate_event_input(build_event_payload(venue_id)))

        # Act
        updated = await command_repo.update_media_urls(
            event_id=event.id, media_urls=['http://testserver/media/events/poster.png']  # type: ignore[arg-type]
        )

        # Assert
        assert updated.media_urls == ['http://testserver/media/events/poster.png']
        assert updated.ticket_types[0].name == 'General Admission'

    @pytest.mark.asyncio
    async def test_update_missing_event(self, database: Database) -> None:
        with pytest.raises(PersistenceError):
            await EventCommandRepoImpl(session_factory=database.session).update_media_urls(
                event_id=MISSING_ID, media_urls=[]
            )


@pytest.mark.integration
class TestUserRoleQueryRepo:
    @pytest.mark.asyncio
    async def test_roles_from_user_roles(
        self, database: Database, execute_sql_statement: Callable[..., Any]
    ) -> None:
        # Arrange
        for role in ('organizer', 'attendee', 'superhero'):
            execute_sql_statement(
                'INSERT INTO user_roles (user_id, role) VALUES (:user_id, :role)',
                {'user_id': 'user-1', 'role': role},
            )
        repo = UserRoleQueryRepoImpl(session_factory=database.session)

        # Act
        roles = await repo.get_roles(user_id='user-1')

        # Assert
        assert roles == {UserRole.ORGANIZER, UserRole.ATTENDEE}
        assert await repo.get_roles(user_id='nobody') == set()
