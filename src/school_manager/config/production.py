import os

FIREBASE_CONFIG = {
    # Unset means Application Default Credentials.
    "credentials_path": os.getenv("FIREBASE_CREDENTIALS_PATH"),
    "project_id": os.getenv("FIREBASE_PROJECT_ID"),
    "api_key": os.getenv("FIREBASE_API_KEY"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "10"))
HEALTH_TIMEOUT_SECONDS = float(os.getenv("HEALTH_TIMEOUT_SECONDS", "5"))
STORE_MAX_WORKERS = int(os.getenv("STORE_MAX_WORKERS", "8"))

REQUEST_TIMEZONE = os.getenv("REQUEST_TIMEZONE", "Africa/Johannesburg")
BODY_TIMEZONE = os.getenv("BODY_TIMEZONE", "UTC")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
