from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import today_iso
from ..core.enums import AttendanceStatus


class Roster:
    """Toggle state for one page load: every known student starts Absent."""

    def __init__(self, student_ids: Iterable):
        self._student_ids = list(student_ids)
        self._status: dict = {}
        self.reset()

    @property
    def student_ids(self) -> list:
        return list(self._student_ids)

    def reset(self) -> None:
        self._status = {sid: AttendanceStatus.ABSENT for sid in self._student_ids}

    def status_of(self, student_id) -> AttendanceStatus:
        return self._status[student_id]

    def toggle(self, student_id) -> AttendanceStatus:
        if student_id not in self._status:
            raise KeyError(student_id)
        current = self._status[student_id]
        self._status[student_id] = (
            AttendanceStatus.PRESENT if current is AttendanceStatus.ABSENT else AttendanceStatus.ABSENT
        )
        return self._status[student_id]

    def css_class(self, student_id) -> str:
        return self._status[student_id].value.lower()

    def to_payload(self, *, date: Optional[str] = None) -> dict:
        """Submission body covering every known id, in roster order."""

        return {
            "attendance": [
                {"studentId": sid, "status": self._status[sid].value} for sid in self._student_ids
            ],
            "date": date or today_iso(),
        }
