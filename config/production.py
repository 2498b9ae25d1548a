import os

from .config import CORS_ORIGINS, PORT, SHEETS_CONFIG, STUDENT_IDS  # noqa: F401

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEBUG = False
