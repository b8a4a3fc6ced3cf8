"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.catalog.app.command import submit_event_use_case, submit_venue_use_case
from src.service.catalog.app.query import (
    get_event_use_case,
    get_venue_use_case,
    list_events_use_case,
    list_media_urls_use_case,
    list_venues_use_case,
)
from src.service.catalog.driving_adapter.http_controller import event_controller, venue_controller
from src.service.catalog.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    submit_venue_use_case,
    submit_event_use_case,
    list_venues_use_case,
    list_events_use_case,
    get_venue_use_case,
    get_event_use_case,
    list_media_urls_use_case,
    role_auth,
    venue_controller,
    event_controller,
]
