"""Constants for the transport.opendata.ch API adapter.

API Documentation: https://transport.opendata.ch/docs.html

No authentication required.
"""

from opendata_transport.domain.models.backend import ApiBackend

TRANSPORT_API_BASE_URL = "https://transport.opendata.ch/v1"

# Resource paths relative to the base URL
LOCATIONS_PATH = "locations"  # GET /locations?query=... or ?x=...&y=...
CONNECTIONS_PATH = "connections"  # GET /connections?from=...&to=...
STATIONBOARD_PATH = "stationboard"  # GET /stationboard?station=... or ?id=...

PRODUCTION_BACKEND = ApiBackend(name="production", base_url=TRANSPORT_API_BASE_URL)

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

DEFAULT_TIMEOUT_SECONDS = 10.0
