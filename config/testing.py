SHEETS_CONFIG = {
    "spreadsheet_id": "test-spreadsheet",
    "worksheet": "Sheet1",
    "credentials_file": None,
    "credentials_json": None,
}

STUDENT_IDS = [1, 2, 3]
CORS_ORIGINS = "*"
LOG_LEVEL = "WARNING"
PORT = 5000

DEBUG = False
TESTING = True
