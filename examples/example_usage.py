"""Example: drive the service layer directly (no Flask).

Marks the first two students present and submits today's roster.
"""

import importlib

from config import get_settings_module

from src.attendance_monitoring.attendance_monitoring.attendance.roster import Roster
from src.attendance_monitoring.attendance_monitoring.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(sheets_config=settings.SHEETS_CONFIG, student_ids=settings.STUDENT_IDS)

    roster = Roster(container.student_ids)
    for sid in container.student_ids[:2]:
        roster.toggle(sid)

    payload = roster.to_payload()
    result = container.attendance_service.submit(payload["attendance"], payload["date"])
    print(result.to_dict())
    print(container.attendance_service.list_summary().to_dict())


if __name__ == "__main__":
    main()
