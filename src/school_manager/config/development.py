import os

FIREBASE_CONFIG = {
    "credentials_path": os.getenv("FIREBASE_CREDENTIALS_PATH", "serviceAccountKey.json"),
    "project_id": os.getenv("FIREBASE_PROJECT_ID"),
    "api_key": os.getenv("FIREBASE_API_KEY"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "10"))
HEALTH_TIMEOUT_SECONDS = float(os.getenv("HEALTH_TIMEOUT_SECONDS", "5"))
STORE_MAX_WORKERS = int(os.getenv("STORE_MAX_WORKERS", "8"))

# Bare date-times from datetime-local pickers are read in the school's zone.
REQUEST_TIMEZONE = os.getenv("REQUEST_TIMEZONE", "Africa/Johannesburg")
BODY_TIMEZONE = os.getenv("BODY_TIMEZONE", "UTC")

# Comma-separated fnmatch patterns.
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:*").split(",") if o.strip()]
