from __future__ import annotations

import io
from typing import Iterable, Optional, Sequence

import pandas as pd

from ..accounts.client import AccountsClient
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..session.model import Session
from .model import LeaveRequest

EXPORT_COLUMNS = [
    "Employee",
    "Email",
    "Department",
    "Leave Type",
    "Reason",
    "Start Date",
    "End Date",
    "Business Days",
    "Status",
    "Applied On",
]


def leave_type_for(reason: str) -> str:
    # first space only; matches the backend's existing leave_type values
    return reason.lower().replace(" ", "_", 1)


class LeaveService:
    """Use case: employees request leave, managers and HR decide."""

    def __init__(self, accounts: AccountsClient):
        self._accounts = accounts

    def apply(self, session: Session, *, reason: str, start_date: str, end_date: str) -> None:
        reason = require_non_empty(reason, "Reason")
        start_s = require_non_empty(start_date, "Start date")
        end_s = require_non_empty(end_date, "End date")
        try:
            start = parse_iso_date(start_s)
            end = parse_iso_date(end_s)
        except ValueError:
            raise ValidationError("Dates must be YYYY-MM-DD")

        if start > end:
            raise ValidationError("End date cannot be before start date")

        self._accounts.apply_leave(
            {
                "email": session.email,
                "department": session.department,
                "reason": reason,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "leave_type": leave_type_for(reason),
                "status": LeaveStatus.PENDING.value,
            }
        )

    def list_for(self, email: str) -> list[LeaveRequest]:
        return [LeaveRequest.from_payload(p) for p in self._accounts.list_leaves(email=email)]

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> list[LeaveRequest]:
        leaves = [LeaveRequest.from_payload(p) for p in self._accounts.list_leaves()]
        if status is not None:
            leaves = [lr for lr in leaves if lr.status is status]
        return leaves

    def decide(self, *, leave_id: int, status: str) -> None:
        decision = LeaveStatus(status) if status in {s.value for s in LeaveStatus} else None
        if decision not in {LeaveStatus.APPROVED, LeaveStatus.REJECTED}:
            raise ValidationError("Decision must be Approved or Rejected")
        if int(leave_id) <= 0:
            raise ValidationError("Leave request not found")
        self._accounts.update_leave(int(leave_id), status=decision.value)

    @staticmethod
    def summarize(leaves: Iterable[LeaveRequest]) -> dict:
        counts = {s.value: 0 for s in LeaveStatus}
        for lr in leaves:
            if lr.status:
                counts[lr.status.value] += 1
        counts["All"] = sum(counts.values())
        return counts

    @staticmethod
    def to_frame(leaves: Sequence[LeaveRequest]) -> pd.DataFrame:
        rows = [
            [
                lr.employee_name or lr.email,
                lr.email,
                lr.department,
                lr.leave_type,
                lr.reason,
                lr.start_date,
                lr.end_date,
                lr.business_days,
                lr.status_label,
                lr.applied_on,
            ]
            for lr in leaves
        ]
        return pd.DataFrame(rows, columns=EXPORT_COLUMNS)

    def export_xlsx(self, leaves: Sequence[LeaveRequest]) -> io.BytesIO:
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            self.to_frame(leaves).to_excel(writer, index=False, sheet_name="Leaves")
        out.seek(0)
        return out
