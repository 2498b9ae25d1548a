from __future__ import annotations

import sys
from pathlib import Path

import importlib

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_monitoring.attendance_monitoring.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    sheets_config = dict(settings.SHEETS_CONFIG)

    container = build_container(sheets_config=sheets_config, student_ids=settings.STUDENT_IDS)
    written = container.records_store.ensure_header()
    state = "header written" if written else "worksheet not empty, left unchanged"
    print(f"OK: {sheets_config.get('spreadsheet_id')}/{sheets_config.get('worksheet')} -> {state}")


if __name__ == "__main__":
    main()
