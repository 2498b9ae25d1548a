"""View-layer transformations shared by the pages, the CSV download and scripts.

Pure functions from records/summaries to render-ready data; no I/O.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Iterable

from ..core.constants import CSV_HEADER
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary

EMPTY_TABLE_MESSAGE = "No attendance records found"
FAILED_TABLE_MESSAGE = "Failed to load attendance data"


@dataclass(frozen=True)
class TableRow:
    cells: tuple[str, ...]
    css_class: str = ""
    colspan: int = 1


def student_label(student_id: str) -> str:
    return f"Student {student_id}"


def table_rows(records: Iterable[AttendanceRecord]) -> list[TableRow]:
    rows = [
        TableRow(
            cells=(student_label(r.student_id), r.date, r.status),
            css_class=r.status.lower(),
        )
        for r in records
    ]
    return rows or [placeholder_row()]


def placeholder_row(*, failed: bool = False) -> TableRow:
    message = FAILED_TABLE_MESSAGE if failed else EMPTY_TABLE_MESSAGE
    return TableRow(cells=(message,), colspan=len(CSV_HEADER))


def chart_config(summary: AttendanceSummary) -> dict:
    """Chart.js pie configuration for the present/absent split."""

    return {
        "type": "pie",
        "data": {
            "labels": [AttendanceStatus.PRESENT.value, AttendanceStatus.ABSENT.value],
            "datasets": [
                {
                    "data": [summary.present, summary.absent],
                    "backgroundColor": ["green", "red"],
                }
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": True,
            "plugins": {
                "legend": {"position": "top"},
                "title": {"display": True, "text": "Attendance Distribution"},
            },
        },
    }


def records_to_csv(records: Iterable[AttendanceRecord]) -> str:
    """Header plus one line per record, newline separated, no trailing newline.

    Fields holding a comma, quote or line break are double-quoted (csv minimal
    quoting); records.js quotes the same way for the browser download.
    """

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for r in records:
        writer.writerow([student_label(r.student_id), r.date, r.status])
    return out.getvalue().rstrip("\n")
