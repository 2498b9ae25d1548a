from __future__ import annotations

import pytest

from src.attendance_monitoring.attendance_monitoring.attendance.model import AttendanceRecord
from src.attendance_monitoring.attendance_monitoring.attendance.service import AttendanceService
from src.attendance_monitoring.attendance_monitoring.core.exceptions import InvalidInputError, StoreUnavailableError
from tests.fakes import InMemoryRecordsStore, UnavailableRecordsStore


def test_submit_appends_one_row_per_entry_in_order(service, store):
    result = service.submit(
        [{"studentId": 1, "status": "Present"}, {"studentId": 2, "status": "Absent"}],
        "2024-01-01",
    )

    assert store.rows == [["1", "2024-01-01", "Present"], ["2", "2024-01-01", "Absent"]]
    assert store.append_calls == 1
    assert result.message == "Attendance saved successfully!"
    assert result.updated_rows == 2
    assert result.updated_range == "Sheet1!A1:C2"


def test_submit_rows_land_at_end_of_existing_records(service, store):
    store.rows = [["Student ID", "Date", "Status"], ["9", "2023-12-31", "Present"]]

    service.submit([{"studentId": "a", "status": "Present"}, {"studentId": "b"}], "2024-01-02")

    assert len(store.rows) == 4
    assert [r.to_row() for r in service.list_records()[-2:]] == [
        ["a", "2024-01-02", "Present"],
        ["b", "2024-01-02", "Absent"],
    ]


@pytest.mark.parametrize("status", [None, "", 0, False])
def test_submit_defaults_falsy_status_to_absent(service, store, status):
    service.submit([{"studentId": 7, "status": status}], "2024-01-01")

    assert store.rows == [["7", "2024-01-01", "Absent"]]


def test_submit_keeps_unrecognized_status_verbatim(service, store):
    service.submit([{"studentId": 7, "status": "Late"}], "2024-01-01")

    assert store.rows == [["7", "2024-01-01", "Late"]]


@pytest.mark.parametrize(
    "attendance, date",
    [
        (None, "2024-01-01"),
        ({"studentId": 1}, "2024-01-01"),
        ("1,2,3", "2024-01-01"),
        ([], "2024-01-01"),
        ([{"studentId": 1, "status": "Present"}], None),
        ([{"studentId": 1, "status": "Present"}], "   "),
        (["not-an-object"], "2024-01-01"),
        ([{"status": "Present"}], "2024-01-01"),
    ],
)
def test_submit_rejects_invalid_input_without_writing(service, store, attendance, date):
    with pytest.raises(InvalidInputError):
        service.submit(attendance, date)

    assert store.rows == []
    assert store.append_calls == 0


def test_submit_same_payload_twice_duplicates_rows(service, store):
    payload = [{"studentId": 1, "status": "Present"}, {"studentId": 2, "status": "Absent"}]

    service.submit(payload, "2024-01-01")
    service.submit(payload, "2024-01-01")

    assert len(store.rows) == 4
    assert store.rows[:2] == store.rows[2:]
    assert service.list_summary().to_dict() == {"Present": 2, "Absent": 2}


def test_submit_propagates_store_outage():
    svc = AttendanceService(UnavailableRecordsStore())

    with pytest.raises(StoreUnavailableError):
        svc.submit([{"studentId": 1, "status": "Present"}], "2024-01-01")


def test_summary_counts_exact_statuses_only():
    store = InMemoryRecordsStore(
        [
            ["1", "2024-01-01", "Present"],
            ["2", "2024-01-01", "Absent"],
            ["3", "2024-01-01", "present"],
            ["4", "2024-01-01", "Late"],
            ["5", "2024-01-01", "Present"],
            ["6", "2024-01-01"],
        ]
    )

    summary = AttendanceService(store).list_summary()

    assert (summary.present, summary.absent) == (2, 1)


def test_summary_reflects_submission(service):
    before = service.list_summary()

    service.submit(
        [{"studentId": 1, "status": "Present"}, {"studentId": 2, "status": "Absent"}],
        "2024-01-01",
    )
    after = service.list_summary()

    assert after.present == before.present + 1
    assert after.absent == before.absent + 1


def test_empty_store_gives_zero_summary_and_no_records(service):
    assert service.list_summary().to_dict() == {"Present": 0, "Absent": 0}
    assert service.list_records() == []


@pytest.mark.parametrize("header", [["Student ID", "Date", "Status"], ["Student Number", "Date", "Status"]])
def test_header_row_excluded_from_both_views(header):
    store = InMemoryRecordsStore([header, ["1", "2024-01-01", "Present"]])
    svc = AttendanceService(store)

    assert svc.list_records() == [AttendanceRecord(student_id="1", date="2024-01-01", status="Present")]
    assert svc.list_summary().to_dict() == {"Present": 1, "Absent": 0}


def test_records_drop_short_rows_and_keep_any_status_in_order():
    store = InMemoryRecordsStore(
        [
            ["1", "2024-01-01", "Present"],
            ["2"],
            [],
            ["3", "2024-01-01", "Excused"],
            ["4", "2024-01-01", "Absent", "extra"],
        ]
    )

    records = AttendanceService(store).list_records()

    assert [r.to_dict() for r in records] == [
        {"studentId": "1", "date": "2024-01-01", "status": "Present"},
        {"studentId": "3", "date": "2024-01-01", "status": "Excused"},
        {"studentId": "4", "date": "2024-01-01", "status": "Absent"},
    ]


def test_read_outage_never_looks_like_empty_data():
    svc = AttendanceService(UnavailableRecordsStore())

    with pytest.raises(StoreUnavailableError):
        svc.list_summary()
    with pytest.raises(StoreUnavailableError):
        svc.list_records()
