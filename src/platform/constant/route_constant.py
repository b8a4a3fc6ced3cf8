# Venue
VENUE_BASE = '/api/venue'
VENUE_GET = '/api/venue/{venue_id}'
VENUE_MEDIA = '/api/venue/{venue_id}/media'

# Event
EVENT_BASE = '/api/event'
EVENT_GET = '/api/event/{event_id}'
EVENT_MEDIA = '/api/event/{event_id}/media'

HEALTH = '/health'
