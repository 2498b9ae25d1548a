from __future__ import annotations

from typing import Protocol, Sequence

from .model import AppendResult


class RecordsStore(Protocol):
    """Append-only tabular store: one row per record, columns id/date/status."""

    def append_rows(self, rows: Sequence[Sequence[str]]) -> AppendResult:
        raise NotImplementedError

    def read_rows(self) -> list[list[str]]:
        """Return every row in storage order, header included if present."""

        raise NotImplementedError
