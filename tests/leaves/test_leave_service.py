from __future__ import annotations

from datetime import date

import pytest

from fakes import FakeAccounts
from hrms_portal.core.enums import LeaveStatus, Role
from hrms_portal.core.exceptions import ValidationError
from hrms_portal.leaves.model import LeaveRequest
from hrms_portal.leaves.service import EXPORT_COLUMNS, LeaveService, leave_type_for
from hrms_portal.session.model import Session

EMPLOYEE = Session(role=Role.EMPLOYEE, email="e@x.com", display_name="Eve", department="Ops")

LEAVES = [
    {"id": 1, "email": "e@x.com", "fullname": "Eve", "reason": "Sick Leave", "leave_type": "sick_leave",
     "start_date": "2026-10-16", "end_date": "2026-10-20", "status": "Pending", "department": "Ops"},
    {"id": 2, "email": "f@x.com", "reason": "Casual Leave", "start_date": "2026-09-01",
     "end_date": "2026-09-01", "status": "approved"},
    {"id": 3, "email": "e@x.com", "reason": "Annual Leave", "start_date": "2026-08-03",
     "end_date": "2026-08-07", "status": "Rejected"},
    {"id": "bad", "email": "g@x.com", "reason": "Other", "start_date": "", "status": "weird"},
]


def test_apply_sends_pending_request():
    accounts = FakeAccounts()

    LeaveService(accounts).apply(EMPLOYEE, reason=" Sick Leave ", start_date="2026-10-20", end_date="2026-10-22")

    assert accounts.applied == [
        {
            "email": "e@x.com",
            "department": "Ops",
            "reason": "Sick Leave",
            "start_date": "2026-10-20",
            "end_date": "2026-10-22",
            "leave_type": "sick_leave",
            "status": "Pending",
        }
    ]


@pytest.mark.parametrize(
    "reason,start,end,message",
    [
        ("", "2026-10-20", "2026-10-22", "Reason is required"),
        ("Sick Leave", "2026-10-22", "2026-10-20", "End date cannot be before start date"),
        ("Sick Leave", "20/10/2026", "2026-10-22", "Dates must be YYYY-MM-DD"),
        ("Sick Leave", "2026-10-20", "", "End date is required"),
    ],
)
def test_apply_rejects_bad_input(reason, start, end, message):
    accounts = FakeAccounts()

    with pytest.raises(ValidationError, match=message):
        LeaveService(accounts).apply(EMPLOYEE, reason=reason, start_date=start, end_date=end)
    assert accounts.applied == []


def test_leave_type_replaces_first_space_only():
    assert leave_type_for("Work From Home") == "work_from home"


def test_list_for_filters_by_email():
    svc = LeaveService(FakeAccounts(leaves=LEAVES))

    assert [lr.leave_id for lr in svc.list_for("e@x.com")] == [1, 3]


def test_list_all_with_status_filter_is_case_insensitive():
    svc = LeaveService(FakeAccounts(leaves=LEAVES))

    assert [lr.leave_id for lr in svc.list_all(status=LeaveStatus.APPROVED)] == [2]
    assert len(svc.list_all()) == 4


def test_unparseable_rows_degrade_gracefully():
    lr = LeaveRequest.from_payload(LEAVES[3])

    assert lr.leave_id is None
    assert lr.status is None
    assert lr.status_label == "Unknown"
    assert lr.business_days == 0


def test_non_string_dates_read_as_missing():
    lr = LeaveRequest.from_payload(
        {"id": 3, "email": "e@x.com", "start_date": 20261020, "end_date": ["2026-10-21"], "applied_on": {}, "status": "Pending"}
    )

    assert (lr.start_date, lr.end_date, lr.applied_on) == (None, None, None)
    assert lr.status is LeaveStatus.PENDING
    assert lr.business_days == 0


def test_business_days_skip_weekends():
    lr = LeaveRequest.from_payload(LEAVES[0])

    assert (lr.start_date, lr.end_date) == (date(2026, 10, 16), date(2026, 10, 20))
    assert lr.business_days == 3


def test_decide_only_accepts_final_states():
    accounts = FakeAccounts()
    svc = LeaveService(accounts)

    svc.decide(leave_id=5, status="Approved")
    svc.decide(leave_id=6, status="Rejected")
    with pytest.raises(ValidationError):
        svc.decide(leave_id=7, status="Pending")
    with pytest.raises(ValidationError):
        svc.decide(leave_id=0, status="Approved")

    assert accounts.decisions == [(5, "Approved"), (6, "Rejected")]


def test_summary_counts_known_statuses():
    leaves = LeaveService(FakeAccounts(leaves=LEAVES)).list_all()

    assert LeaveService.summarize(leaves) == {"Pending": 1, "Approved": 1, "Rejected": 1, "All": 3}


def test_frame_has_export_columns():
    leaves = LeaveService(FakeAccounts(leaves=LEAVES)).list_all()

    frame = LeaveService.to_frame(leaves)

    assert list(frame.columns) == EXPORT_COLUMNS
    assert frame.iloc[0]["Employee"] == "Eve"
    assert frame.iloc[1]["Employee"] == "f@x.com"
    assert frame.iloc[0]["Business Days"] == 3


def test_export_produces_xlsx_bytes():
    leaves = LeaveService(FakeAccounts(leaves=LEAVES)).list_all()

    out = LeaveService(FakeAccounts()).export_xlsx(leaves)

    assert out.read(2) == b"PK"
