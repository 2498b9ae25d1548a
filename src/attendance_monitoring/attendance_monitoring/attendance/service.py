from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_non_empty_list, require_present
from ..core.constants import SUBMIT_SUCCESS_MESSAGE
from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidInputError
from .model import AttendanceEntry, AttendanceRecord, AttendanceSummary, SubmissionResult
from .policy import HeaderRule, StatusPolicy
from .repository import RecordsStore

logger = logging.getLogger(__name__)


class AttendanceService:
    """Validate, persist and aggregate attendance records.

    Holds no state between calls apart from the injected store.
    """

    def __init__(
        self,
        store: RecordsStore,
        *,
        status_policy: StatusPolicy | None = None,
        header_rule: HeaderRule | None = None,
    ):
        self._store = store
        self._status_policy = status_policy or StatusPolicy()
        self._header_rule = header_rule or HeaderRule()

    def submit(self, attendance: Any, date: Any) -> SubmissionResult:
        entries = self._normalize(attendance, date)
        day = str(date).strip()
        rows = [AttendanceRecord(student_id=e.student_id, date=day, status=e.status).to_row() for e in entries]

        logger.info("Appending %d attendance rows for %s", len(rows), day)
        result = self._store.append_rows(rows)

        return SubmissionResult(
            message=SUBMIT_SUCCESS_MESSAGE,
            updated_range=result.updated_range,
            updated_rows=result.updated_rows,
        )

    def list_summary(self) -> AttendanceSummary:
        present = absent = 0
        for row in self._header_rule.data_rows(self._store.read_rows()):
            if len(row) < 3:
                continue
            bucket = self._status_policy.bucket(row[2])
            if bucket is AttendanceStatus.PRESENT:
                present += 1
            elif bucket is AttendanceStatus.ABSENT:
                absent += 1
        return AttendanceSummary(present=present, absent=absent)

    def list_records(self) -> list[AttendanceRecord]:
        records = []
        for row in self._header_rule.data_rows(self._store.read_rows()):
            if len(row) < 3:
                logger.debug("Skipping malformed row %r", row)
                continue
            records.append(AttendanceRecord(student_id=str(row[0]), date=str(row[1]), status=str(row[2])))
        return records

    def _normalize(self, attendance: Any, date: Any) -> list[AttendanceEntry]:
        require_non_empty_list(attendance, "attendance")
        require_present(date, "date")

        entries = []
        for index, item in enumerate(attendance):
            if not isinstance(item, dict):
                raise InvalidInputError(f"attendance[{index}] must be an object")
            require_present(item.get("studentId"), f"attendance[{index}].studentId")
            entries.append(
                AttendanceEntry(
                    student_id=str(item["studentId"]),
                    status=self._status_policy.normalize(item.get("status")),
                )
            )
        return entries
