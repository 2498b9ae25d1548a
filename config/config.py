import os


def _student_ids(raw):
    if not raw:
        return list(range(1, 11))
    ids = []
    for part in raw.split(","):
        part = part.strip()
        if part:
            ids.append(int(part) if part.isdigit() else part)
    return ids


def _origins(raw):
    if not raw or raw.strip() == "*":
        return "*"
    return [s.strip() for s in raw.split(",") if s.strip()]


class Config:
    # Google Sheets records store
    SPREADSHEET_ID = os.environ.get("SPREADSHEET_ID", "")
    WORKSHEET_NAME = os.environ.get("WORKSHEET_NAME", "Sheet1")
    GOOGLE_CREDENTIALS_FILE = os.environ.get("GOOGLE_CREDENTIALS_FILE")
    GOOGLE_CREDENTIALS_JSON = os.environ.get("GOOGLE_CREDENTIALS_JSON")

    # Roster shown on the marking page
    STUDENT_IDS = _student_ids(os.environ.get("STUDENT_IDS"))

    CORS_ORIGINS = _origins(os.environ.get("CORS_ORIGINS"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    PORT = int(os.environ.get("PORT", "5000"))


SHEETS_CONFIG = {
    "spreadsheet_id": Config.SPREADSHEET_ID,
    "worksheet": Config.WORKSHEET_NAME,
    "credentials_file": Config.GOOGLE_CREDENTIALS_FILE,
    "credentials_json": Config.GOOGLE_CREDENTIALS_JSON,
}

STUDENT_IDS = Config.STUDENT_IDS
CORS_ORIGINS = Config.CORS_ORIGINS
LOG_LEVEL = Config.LOG_LEVEL
PORT = Config.PORT
DEBUG = bool(int(os.environ.get("DEBUG", "1")))
