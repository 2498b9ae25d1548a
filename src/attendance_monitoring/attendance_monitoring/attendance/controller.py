from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template, request

from ..core.constants import CSV_FILENAME
from ..core.exceptions import InvalidInputError, StoreUnavailableError
from ..container import Container
from .presenters import chart_config, placeholder_row, records_to_csv, table_rows
from .roster import Roster

logger = logging.getLogger(__name__)


def _store_error_response(error: str, e: StoreUnavailableError):
    payload = {"error": error, "message": str(e)}
    if e.code is not None:
        payload["code"] = e.code
    return jsonify(payload), 500


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/", endpoint="index")
    def index():
        roster = Roster(container.student_ids)
        return render_template("index.html", roster=roster)

    @app.route("/records", endpoint="records")
    def records_page():
        # First paint is server-rendered; the page script refreshes in place.
        try:
            rows = table_rows(service.list_records())
            chart = chart_config(service.list_summary())
        except StoreUnavailableError:
            logger.exception("Failed to load attendance records page")
            rows = [placeholder_row(failed=True)]
            chart = None
        return render_template("records.html", rows=rows, chart=chart)

    @app.route("/roster", methods=["GET"], endpoint="roster")
    def roster():
        return jsonify({"studentIds": list(container.student_ids)})

    @app.route("/submit-attendance", methods=["POST"], endpoint="submit_attendance")
    def submit_attendance():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Invalid request", "message": "Request body must be a JSON object"}), 400

        try:
            result = service.submit(data.get("attendance"), data.get("date"))
        except InvalidInputError as e:
            logger.warning("Rejected attendance submission: %s", e)
            return jsonify({"error": "Invalid request", "message": str(e)}), 400
        except StoreUnavailableError as e:
            logger.exception("Failed to save attendance")
            return _store_error_response("Failed to save attendance", e)

        return jsonify(result.to_dict())

    @app.route("/attendance-data", methods=["GET"], endpoint="attendance_data")
    def attendance_data():
        try:
            summary = service.list_summary()
        except StoreUnavailableError as e:
            logger.exception("Failed to fetch attendance summary")
            return _store_error_response("Failed to fetch data", e)
        return jsonify(summary.to_dict())

    @app.route("/all-attendance-records", methods=["GET"], endpoint="all_attendance_records")
    def all_attendance_records():
        try:
            records = service.list_records()
        except StoreUnavailableError as e:
            logger.exception("Failed to fetch attendance records")
            return _store_error_response("Failed to fetch attendance records", e)
        return jsonify([r.to_dict() for r in records])

    @app.route(f"/{CSV_FILENAME}", methods=["GET"], endpoint="attendance_csv")
    def attendance_csv():
        """Same serialization as the page's client-side download."""
        try:
            records = service.list_records()
        except StoreUnavailableError as e:
            logger.exception("Failed to export attendance records")
            return _store_error_response("Failed to fetch attendance records", e)

        return app.response_class(
            records_to_csv(records).encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={CSV_FILENAME}"},
        )
