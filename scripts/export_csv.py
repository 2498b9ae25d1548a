from __future__ import annotations

import sys
from pathlib import Path

import importlib

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_monitoring.attendance_monitoring.attendance.presenters import records_to_csv
from src.attendance_monitoring.attendance_monitoring.container import build_container
from src.attendance_monitoring.attendance_monitoring.core.constants import CSV_FILENAME


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(sheets_config=dict(settings.SHEETS_CONFIG), student_ids=settings.STUDENT_IDS)

    out_file = Path(sys.argv[1]) if len(sys.argv) > 1 else REPO_ROOT / CSV_FILENAME
    records = container.attendance_service.list_records()
    out_file.write_text(records_to_csv(records) + "\n", encoding="utf-8")
    print(f"OK: Exported {len(records)} records -> {out_file}")


if __name__ == "__main__":
    main()
