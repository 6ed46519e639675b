import os

FIREBASE_CONFIG = {
    "credentials_path": os.getenv("FIREBASE_CREDENTIALS_PATH"),
    "project_id": os.getenv("FIREBASE_PROJECT_ID", "school-manager-test"),
    "api_key": os.getenv("FIREBASE_API_KEY"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "2"))
HEALTH_TIMEOUT_SECONDS = float(os.getenv("HEALTH_TIMEOUT_SECONDS", "1"))
STORE_MAX_WORKERS = int(os.getenv("STORE_MAX_WORKERS", "4"))

REQUEST_TIMEZONE = os.getenv("REQUEST_TIMEZONE", "Africa/Johannesburg")
BODY_TIMEZONE = os.getenv("BODY_TIMEZONE", "UTC")

CORS_ORIGINS = ["http://localhost:*"]
