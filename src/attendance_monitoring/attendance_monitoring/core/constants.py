"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_WORKSHEET = "Sheet1"
RECORD_COLUMNS = "A:C"

SHEET_HEADER = ("Student ID", "Date", "Status")
HEADER_ID_TOKENS = frozenset({"Student ID", "Student Number", "Student"})

CSV_HEADER = ("Student Number", "Date", "Status")
CSV_FILENAME = "attendance_records.csv"

SUBMIT_SUCCESS_MESSAGE = "Attendance saved successfully!"
