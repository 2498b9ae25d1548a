from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Sequence

import gspread
import requests
from google.auth.exceptions import GoogleAuthError

from ..core.constants import RECORD_COLUMNS, SHEET_HEADER
from ..core.exceptions import StoreUnavailableError
from ..sheets.connection import SheetsConnection
from .model import AppendResult
from .repository import RecordsStore

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Translate gspread/transport failures into StoreUnavailableError."""

    try:
        yield
    except gspread.exceptions.APIError as e:
        code = getattr(e.response, "status_code", None)
        logger.error("Google Sheets API error while %s (status=%s)", action, code)
        raise StoreUnavailableError(f"Google Sheets rejected the request while {action}: {e}", code=code) from e
    except requests.RequestException as e:
        logger.error("Google Sheets unreachable while %s", action)
        raise StoreUnavailableError(f"Google Sheets is unreachable while {action}: {e}") from e
    except GoogleAuthError as e:
        # token fetch failed: network down, key revoked or account disabled
        logger.error("Google credentials rejected or unreachable while %s", action)
        raise StoreUnavailableError(f"Google Sheets authorization failed while {action}: {e}") from e


class GoogleSheetsRecordsStore(RecordsStore):
    def __init__(self, connection: SheetsConnection):
        self._connection = connection

    def append_rows(self, rows: Sequence[Sequence[str]]) -> AppendResult:
        with store_errors("appending rows"):
            response = self._connection.worksheet().append_rows(
                [list(r) for r in rows],
                value_input_option="RAW",
                insert_data_option="INSERT_ROWS",
                table_range=RECORD_COLUMNS,
            )

        updates = (response or {}).get("updates") or {}
        updated_rows = updates.get("updatedRows")
        return AppendResult(
            updated_range=updates.get("updatedRange"),
            updated_rows=int(updated_rows) if updated_rows is not None else None,
        )

    def read_rows(self) -> list[list[str]]:
        with store_errors("reading rows"):
            values = self._connection.worksheet().get_values(RECORD_COLUMNS, pad_values=False)

        if not isinstance(values, list):
            raise StoreUnavailableError("Google Sheets returned a malformed value range")
        return [list(row) for row in values]

    def ensure_header(self) -> bool:
        """Write the fixed header into an empty worksheet; True when written."""

        # an empty sheet reads back as [[]]
        if any(self.read_rows()):
            return False
        self.append_rows([list(SHEET_HEADER)])
        return True
