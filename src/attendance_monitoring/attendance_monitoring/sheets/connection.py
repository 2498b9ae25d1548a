from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional

import gspread
from google.oauth2.service_account import Credentials

from ..core.constants import DEFAULT_WORKSHEET
from ..core.exceptions import ConfigurationError, NotFoundError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


@dataclass
class SheetsConfig:
    spreadsheet_id: str
    worksheet: str = DEFAULT_WORKSHEET
    credentials_file: Optional[str] = None
    credentials_json: Optional[str] = None


def load_credentials(config: SheetsConfig) -> Credentials:
    """Load service-account credentials from inline JSON or a key file."""

    try:
        if config.credentials_json:
            return Credentials.from_service_account_info(json.loads(config.credentials_json), scopes=SCOPES)
        if config.credentials_file:
            return Credentials.from_service_account_file(config.credentials_file, scopes=SCOPES)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Google credentials could not be loaded: {e}") from e
    raise ConfigurationError("GOOGLE_CREDENTIALS_FILE or GOOGLE_CREDENTIALS_JSON must be set")


class SheetsConnection:
    """Authorized gspread client, created once at startup.

    Note: the spreadsheet itself is opened on first use and then reused.
    """

    def __init__(self, config: SheetsConfig, *, client: Optional[gspread.Client] = None):
        if not config.spreadsheet_id:
            raise ConfigurationError("SPREADSHEET_ID must be set")
        self._config = config
        self._client = client or gspread.authorize(load_credentials(config))
        self._worksheet: Optional[gspread.Worksheet] = None

    @property
    def config(self) -> SheetsConfig:
        return self._config

    def worksheet(self) -> gspread.Worksheet:
        if self._worksheet is None:
            try:
                spreadsheet = self._client.open_by_key(self._config.spreadsheet_id)
                self._worksheet = spreadsheet.worksheet(self._config.worksheet)
            except gspread.exceptions.SpreadsheetNotFound as e:
                raise NotFoundError(f"Spreadsheet {self._config.spreadsheet_id} not found") from e
            except gspread.exceptions.WorksheetNotFound as e:
                raise NotFoundError(f"Worksheet {self._config.worksheet!r} not found") from e
            logger.info("Opened worksheet %r of spreadsheet %s", self._config.worksheet, self._config.spreadsheet_id)
        return self._worksheet
