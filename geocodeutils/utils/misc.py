from __future__ import annotations

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

DEFAULT_TIMEOUT = 30  # seconds

API_KEY_ENV_VAR = "GEOCODING_API_KEY"

# Placeholder used when logging URLs; keys never reach the log sink.
REDACTED = "<redacted>"
