import os

from .config import CORS_ORIGINS, PORT, SHEETS_CONFIG, STUDENT_IDS  # noqa: F401

# Local key file is the usual setup while developing
SHEETS_CONFIG = dict(SHEETS_CONFIG)
SHEETS_CONFIG["credentials_file"] = SHEETS_CONFIG.get("credentials_file") or os.getenv(
    "GOOGLE_APPLICATION_CREDENTIALS", "credentials.json"
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
DEBUG = True
