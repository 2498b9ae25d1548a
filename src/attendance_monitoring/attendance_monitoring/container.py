from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.repository import RecordsStore
from .attendance.service import AttendanceService
from .attendance.sheets_records_store import GoogleSheetsRecordsStore
from .core.constants import DEFAULT_WORKSHEET
from .sheets.connection import SheetsConfig, SheetsConnection


@dataclass(frozen=True)
class Container:
    records_store: RecordsStore
    attendance_service: AttendanceService
    student_ids: tuple


def build_container(
    *,
    sheets_config: dict,
    student_ids,
    records_store: Optional[RecordsStore] = None,
) -> Container:
    """Wire the store and services once at startup.

    Passing records_store skips the Google Sheets connection entirely.
    """

    if records_store is None:
        config = SheetsConfig(
            spreadsheet_id=str(sheets_config.get("spreadsheet_id") or ""),
            worksheet=str(sheets_config.get("worksheet") or DEFAULT_WORKSHEET),
            credentials_file=sheets_config.get("credentials_file"),
            credentials_json=sheets_config.get("credentials_json"),
        )
        records_store = GoogleSheetsRecordsStore(SheetsConnection(config))

    return Container(
        records_store=records_store,
        attendance_service=AttendanceService(records_store),
        student_ids=tuple(student_ids),
    )
