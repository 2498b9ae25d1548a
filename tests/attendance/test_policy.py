from __future__ import annotations

import pytest

from src.attendance_monitoring.attendance_monitoring.attendance.policy import HeaderRule, StatusPolicy
from src.attendance_monitoring.attendance_monitoring.core.enums import AttendanceStatus


def test_status_policy_normalize():
    policy = StatusPolicy()

    assert policy.normalize(None) == "Absent"
    assert policy.normalize("") == "Absent"
    assert policy.normalize("Present") == "Present"
    assert policy.normalize(AttendanceStatus.PRESENT) == "Present"
    assert policy.normalize("late") == "late"


def test_status_policy_bucket_is_case_sensitive():
    policy = StatusPolicy()

    assert policy.bucket("Present") is AttendanceStatus.PRESENT
    assert policy.bucket("Absent") is AttendanceStatus.ABSENT
    assert policy.bucket("ABSENT") is None
    assert policy.bucket(" Present") is None
    assert policy.bucket(None) is None


@pytest.mark.parametrize(
    "row, expected",
    [
        (["Student ID", "Date", "Status"], True),
        (["Student Number", "Date", "Status"], True),
        ([" Student ", "Date ", "Status"], True),
        (["12", "2024-01-01", "Status"], False),
        (["Student ID", "Date"], False),
        (["1", "2024-01-01", "Present"], False),
    ],
)
def test_header_rule_is_header(row, expected):
    assert HeaderRule().is_header(row) is expected


def test_header_rule_only_checks_first_row():
    rows = [["1", "2024-01-01", "Present"], ["Student ID", "Date", "Status"]]

    assert HeaderRule().data_rows(rows) == rows
