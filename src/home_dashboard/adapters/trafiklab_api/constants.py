"""Constants for the Trafiklab Realtime API adapter.

API Documentation: https://www.trafiklab.se/api/our-apis/trafiklab-realtime-apis/

Authentication: API key passed as the ``key`` query parameter.
Bronze keys allow 25 requests per minute and 100 000 per month.
"""

TRAFIKLAB_BASE_URL = "https://realtime-api.trafiklab.se/v1"
TRAFIKLAB_DEPARTURES_URL = f"{TRAFIKLAB_BASE_URL}/departures"  # GET /departures/{stop_id}
TRAFIKLAB_STOP_LOOKUP_URL = f"{TRAFIKLAB_BASE_URL}/stops/name"  # GET /stops/name/{query}

# 25 requests/minute on a bronze key is one every 2.4s
TRAFIKLAB_MIN_DELAY_SECONDS = 2.5

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Trafiklab transport_mode -> dashboard transport type
TRANSPORT_TYPES = {
    "bus": "bus",
    "train": "train",
    "rail": "train",
    "tram": "tram",
    "light_rail": "tram",
}
DEFAULT_TRANSPORT_TYPE = "bus"
