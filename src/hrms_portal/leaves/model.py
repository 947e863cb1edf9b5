from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import business_days_between, try_parse_iso_date
from ..core.enums import LeaveStatus


def _parse_status(value: Any) -> Optional[LeaveStatus]:
    if not isinstance(value, str):
        return None
    for status in LeaveStatus:
        if status.value.lower() == value.strip().lower():
            return status
    return None


@dataclass(frozen=True)
class LeaveRequest:
    leave_id: Optional[int]
    email: str
    reason: str
    leave_type: str
    start_date: Optional[date]
    end_date: Optional[date]
    status: Optional[LeaveStatus]
    applied_on: Optional[date] = None
    department: str = ""
    employee_name: str = ""

    @property
    def status_label(self) -> str:
        return self.status.value if self.status else "Unknown"

    @property
    def business_days(self) -> int:
        if not self.start_date or not self.end_date:
            return 0
        return business_days_between(self.start_date, self.end_date)

    @classmethod
    def from_payload(cls, payload: dict) -> "LeaveRequest":
        raw_id = payload.get("id")
        try:
            leave_id = int(raw_id) if raw_id is not None else None
        except (TypeError, ValueError):
            leave_id = None

        return cls(
            leave_id=leave_id,
            email=str(payload.get("email") or ""),
            reason=str(payload.get("reason") or ""),
            leave_type=str(payload.get("leave_type") or ""),
            start_date=try_parse_iso_date(payload.get("start_date")),
            end_date=try_parse_iso_date(payload.get("end_date")),
            status=_parse_status(payload.get("status")),
            applied_on=try_parse_iso_date(payload.get("applied_on")),
            department=str(payload.get("department") or ""),
            employee_name=str(payload.get("fullname") or payload.get("employee_name") or ""),
        )
