from src.service.catalog.driven_adapter.model.add_on_model import AddOnModel, EventAddOnModel
from src.service.catalog.driven_adapter.model.event_model import EventModel
from src.service.catalog.driven_adapter.model.ticket_model import TicketModel
from src.service.catalog.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.catalog.driven_adapter.model.user_role_model import UserRoleModel
from src.service.catalog.driven_adapter.model.venue_model import VenueModel

__all__ = [
    'AddOnModel',
    'EventAddOnModel',
    'EventModel',
    'TicketModel',
    'TicketTypeModel',
    'UserRoleModel',
    'VenueModel',
]
