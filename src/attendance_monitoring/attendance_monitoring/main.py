from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.repository import RecordsStore
from .container import build_container

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # gspread/google-auth debug output is noisy
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("google.auth").setLevel(logging.WARNING)


def create_app(*, settings_module: Optional[str] = None, records_store: Optional[RecordsStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))
    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"))

    sheets_config = dict(getattr(settings, "SHEETS_CONFIG"))
    logger.info(
        "settings=%s spreadsheet=%s worksheet=%s",
        settings_module, sheets_config.get("spreadsheet_id"), sheets_config.get("worksheet"),
    )

    # Missing credentials raise ConfigurationError here and abort startup.
    container = build_container(
        sheets_config=sheets_config,
        student_ids=getattr(settings, "STUDENT_IDS"),
        records_store=records_store,
    )

    register_attendance(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(Exception)
    def unhandled_exception(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error", "message": str(exc)}), 500

    return app
