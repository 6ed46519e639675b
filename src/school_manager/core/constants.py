"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

API_PREFIX = "/api"

DEFAULT_STORE_TIMEOUT_SECONDS = 10.0
DEFAULT_HEALTH_TIMEOUT_SECONDS = 5.0
DEFAULT_STORE_MAX_WORKERS = 8

DEFAULT_REQUEST_TIMEZONE = "Africa/Johannesburg"
DEFAULT_BODY_TIMEZONE = "UTC"

MIN_PASSWORD_LENGTH = 6
DEFAULT_PAYMENT_METHOD = "Credit Card"
UNKNOWN_GRADE = "Unknown"
