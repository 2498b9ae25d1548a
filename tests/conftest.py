from __future__ import annotations

import pytest

from src.attendance_monitoring.attendance_monitoring.attendance.service import AttendanceService
from src.attendance_monitoring.attendance_monitoring.main import create_app
from tests.fakes import InMemoryRecordsStore


@pytest.fixture
def store():
    return InMemoryRecordsStore()


@pytest.fixture
def service(store):
    return AttendanceService(store)


@pytest.fixture
def app(store):
    return create_app(settings_module="config.testing", records_store=store)


@pytest.fixture
def client(app):
    return app.test_client()
