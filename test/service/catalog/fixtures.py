"""
Catalog Service Fixtures

Form payloads and HTTP helpers shared by the catalog integration tests and
BDD steps.
"""

from collections.abc import Callable
from typing import Any

from fastapi.testclient import TestClient
import httpx
import orjson
import pytest

from src.platform.constant.route_constant import EVENT_BASE, VENUE_BASE
from test.util_constant import (
    DEFAULT_EVENT_DESCRIPTION,
    DEFAULT_EVENT_END,
    DEFAULT_EVENT_NAME,
    DEFAULT_EVENT_START,
    DEFAULT_TICKET_COUNT,
    DEFAULT_TICKET_PRICE,
    DEFAULT_VENUE_ADDRESS,
    DEFAULT_VENUE_CAPACITY,
    DEFAULT_VENUE_CITY,
    DEFAULT_VENUE_NAME,
    DEFAULT_VENUE_ZIP,
)


MediaFile = tuple[str, bytes, str]


def build_venue_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        'name': DEFAULT_VENUE_NAME,
        'address': DEFAULT_VENUE_ADDRESS,
        'city': DEFAULT_VENUE_CITY,
        'zip_code': DEFAULT_VENUE_ZIP,
        'capacity': DEFAULT_VENUE_CAPACITY,
        'rental_rate_per_hour': 80,
        'description': ['outdoor', 'accessible'],
    }
    payload.update(overrides)
    return payload


def build_event_payload(venue_id: str, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        'name': DEFAULT_EVENT_NAME,
        'venue_id': venue_id,
        'description': DEFAULT_EVENT_DESCRIPTION,
        'start_date': DEFAULT_EVENT_START,
        'end_date': DEFAULT_EVENT_END,
        'ticket_count': DEFAULT_TICKET_COUNT,
        'price': DEFAULT_TICKET_PRICE,
    }
    payload.update(overrides)
    return payload


def submit_form(
    client: TestClient,
    url: str,
    payload: dict[str, Any],
    *,
    media: list[MediaFile] | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """POST the multipart submission form: `payload` as JSON plus `media` files."""
    files = [('media', file) for file in media or []]
    return client.post(
        url,
        data={'payload': orjson.dumps(payload).decode()},
        files=files or None,
        headers=headers or {},
    )


@pytest.fixture
def venue_payload() -> dict[str, Any]:
    return build_venue_payload()


@pytest.fixture
def create_venue(
    client: TestClient, organizer_headers: dict[str, str]
) -> Callable[..., dict[str, Any]]:
    """Create a venue through the API and return its JSON representation."""

    def _create(**overrides: Any) -> dict[str, Any]:
        response = submit_form(
            client, VENUE_BASE, build_venue_payload(**overrides), headers=organizer_headers
        )
        assert response.status_code == 201, response.text
        return response.json()['venue']

    return _create


@pytest.fixture
def create_event(
    client: TestClient, organizer_headers: dict[str, str]
) -> Callable[..., dict[str, Any]]:
    def _create(venue_id: str, **overrides: Any) -> dict[str, Any]:
        response = submit_form(
            client,
            EVENT_BASE,
            build_event_payload(venue_id, **overrides),
            headers=organizer_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()['event']

    return _create
