from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Access-control role; the only authorization dimension in the portal."""

    CEO = "ceo"
    MANAGER = "manager"
    HR = "hr"
    EMPLOYEE = "employee"
    ADMIN = "admin"

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> Optional["Role"]:
        """Return the matching role, or None for anything outside the closed set."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_ROLE_LABELS = {
    Role.CEO: "CEO",
    Role.MANAGER: "Manager",
    Role.HR: "HR",
    Role.EMPLOYEE: "Employee",
    Role.ADMIN: "Admin",
}


class AccessOutcome(str, Enum):
    """Result of the shell's authorization decision."""

    AUTHORIZED = "AUTHORIZED"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"


class LeaveStatus(str, Enum):
    """Leave workflow states as stored by the backend."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
