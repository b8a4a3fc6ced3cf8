"""
Integration tests for the event endpoints.
"""

from collections.abc import Callable
from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import EVENT_BASE, EVENT_GET, EVENT_MEDIA
from test.service.catalog.fixtures import build_event_payload, submit_form
from test.util_constant import PNG_BYTES


MISSING_VENUE_ID = '0192f3a4-0000-7000-8000-000000000000'


@pytest.mark.integration
class TestSubmitEvent:
    def test_create_event_with_poster(
        self,
        client: TestClient,
        organizer_headers: dict[str, str],
        create_venue: Callable[..., dict[str, Any]],
    ) -> None:
        """
        Given: An existing venue
        When: An organizer submits an event with one poster
        Then: The event is created with its default ticket type, venue and poster URL
        """
        # Arrange
        venue = create_venue()

        # Act
        response = submit_form(
            client,
            EVENT_BASE,
            build_event_payload(venue['id'], ticket_count=150, price='19.99'),
            media=[('poster.png', PNG_BYTES, 'image/png')],
            headers=organizer_headers,
        )

        # Assert
        assert response.status_code == 201, response.text
        event = response.json()['event']
        assert event['venue']['id'] == venue['id']
        assert event['ticket_types'] == [
            {
                'id': event['ticket_types'][0]['id'],
                'name': 'General Admission',
                'description': None,
                'price': 19.99,
                'quantity_available': 150,
                'start_sales_date': None,
                'end_sales_date': None,
            }
        ]
        assert len(event['media_urls']) == 1
        assert event['media_urls'][0].startswith(f'http://testserver/media/events/{event["id"]}/')
        assert client.get(EVENT_MEDIA.format(event_id=event['id'])).json()['urls'] == event['media_urls']

    def test_unknown_venue_is_conflict(
        self, client: TestClient, organizer_headers: dict[str, str]
    ) -> None:
        # Arrange: load the list cache first
        assert client.get(EVENT_BASE).json() == []

        # Act
        response = submit_form(
            client,
            EVENT_BASE,
            build_event_payload(MISSING_VENUE_ID),
            media=[('poster.png', PNG_BYTES, 'image/png')],
            headers=organizer_headers,
        )

        # Assert
        assert response.status_code == 409
        body = response.json()
        assert body['failed_step'] == 'creating_entity'
        assert body['notification'] == f'Could not create event: Venue {MISSING_VENUE_ID} does not exist'
        assert body['event'] is None
        assert client.get(EVENT_BASE).json() == []
        assert client.get(EVENT_BASE, params={'refresh': True}).json() == []

    def test_end_before_start(
        self,
        client: TestClient,
        organizer_headers: dict[str, str],
        create_venue: Callable[..., dict[str, Any]],
    ) -> None:
        # Arrange
        venue = create_venue()

        # Act
        response = submit_form(
            client,
            EVENT_BASE,
            build_event_payload(venue['id'], end_date='2030-05-01T18:00:00Z'),
            headers=organizer_headers,
        )

        # Assert
        assert response.status_code == 422
        assert response.json()['violations'] == [
            {
                'field': 'end_date',
                'message': 'End date and time must be after the start date and time.',
            }
        ]


@pytest.mark.integration
class TestReadEvents:
    def test_list_by_start_date_and_get_by_id(
        self,
        client: TestClient,
        create_venue: Callable[..., dict[str, Any]],
        create_event: Callable[..., dict[str, Any]],
    ) -> None:
        # Arrange
        venue = create_venue()
        june = create_event(
            venue['id'], name='June Gala', start_date='2030-06-01T19:00:00Z', end_date='2030-06-01T23:00:00Z'
        )
        create_event(venue['id'], name='May Fair')

        # Act
        listed = client.get(EVENT_BASE).json()
        fetched = client.get(EVENT_GET.format(event_id=june['id']))

        # Assert
        assert [e['name'] for e in listed] == ['May Fair', 'June Gala']
        assert fetched.status_code == 200
        assert fetched.json()['venue']['name'] == venue['name']

    def test_get_missing(self, client: TestClient) -> None:
        assert client.get(EVENT_GET.format(event_id='missing')).status_code == 404
