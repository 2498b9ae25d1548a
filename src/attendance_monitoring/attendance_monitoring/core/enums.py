from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance states counted by the summary view."""

    PRESENT = "Present"
    ABSENT = "Absent"
