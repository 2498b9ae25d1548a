from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One normalized line of a submitted roster."""

    student_id: str
    status: str


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one stored (student, date, status) row."""

    student_id: str
    date: str
    status: str

    def to_row(self) -> list[str]:
        return [self.student_id, self.date, self.status]

    def to_dict(self) -> dict:
        return {"studentId": self.student_id, "date": self.date, "status": self.status}


@dataclass(frozen=True)
class AttendanceSummary:
    present: int = 0
    absent: int = 0

    def to_dict(self) -> dict:
        return {AttendanceStatus.PRESENT.value: self.present, AttendanceStatus.ABSENT.value: self.absent}


@dataclass(frozen=True)
class AppendResult:
    """What the store reports back after an append."""

    updated_range: Optional[str] = None
    updated_rows: Optional[int] = None


@dataclass(frozen=True)
class SubmissionResult:
    message: str
    updated_range: Optional[str] = None
    updated_rows: Optional[int] = None

    def to_dict(self) -> dict:
        data: dict = {"message": self.message}
        if self.updated_range is not None:
            data["updatedRange"] = self.updated_range
        if self.updated_rows is not None:
            data["updatedRows"] = self.updated_rows
        return data
