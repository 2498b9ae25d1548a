"""Explicit rules for loose status values and the optional header row."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..core.constants import HEADER_ID_TOKENS
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusPolicy:
    default_status: AttendanceStatus = AttendanceStatus.ABSENT

    def normalize(self, value: Any) -> str:
        """Submitted status as stored: falsy becomes the default, anything else is kept verbatim."""
        if not value:
            return self.default_status.value
        if isinstance(value, AttendanceStatus):
            return value.value
        return str(value)

    def bucket(self, value: Any) -> Optional[AttendanceStatus]:
        """Summary bucket for a stored status; exact, case-sensitive match or None."""
        for status in AttendanceStatus:
            if value == status.value:
                return status
        return None


@dataclass(frozen=True)
class HeaderRule:
    """Decide whether the first stored row is a header.

    Only the first row is ever checked, and all three cells must match so a
    data row carrying a stray "Status" value is not swallowed.
    """

    id_tokens: frozenset = HEADER_ID_TOKENS

    def is_header(self, row: Sequence[Any]) -> bool:
        if len(row) < 3:
            return False
        first, second, third = (str(cell).strip() for cell in row[:3])
        return first in self.id_tokens and second == "Date" and third == "Status"

    def data_rows(self, rows: Sequence[Sequence[Any]]) -> Sequence[Sequence[Any]]:
        if rows and self.is_header(rows[0]):
            return rows[1:]
        return rows
