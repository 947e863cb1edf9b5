"""Sidebar navigation per role.

Paths are literal strings other screens link to; keep their spelling as is.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class NavLink:
    label: str
    path: str


ROLE_NAVIGATION: dict[Role, tuple[NavLink, ...]] = {
    Role.CEO: (
        NavLink("Overview", "/ceo/overview"),
        NavLink("Dashboard", "/ceo/dashboard"),
        NavLink("Employees", "/ceo/employees"),
        NavLink("Attendance", "/ceo/attendence"),
        NavLink("Projects", "/ceo/projects"),
        NavLink("Finance", "/ceo/finance"),
        NavLink("Reports", "/ceo/reports"),
        NavLink("Monthly Report", "/ceo/ceo_monthly_report"),
        NavLink("Shift", "/ceo/shift"),
        NavLink("Petty Cash", "/ceo/petty-cash"),
        NavLink("Tickets", "/ceo/ceo_tickets"),
        NavLink("Notice", "/ceo/notice"),
        NavLink("Profile", "/ceo/profile"),
    ),
    Role.MANAGER: (
        NavLink("Team", "/manager/team"),
        NavLink("Tasks", "/manager/tasks"),
        NavLink("Attendance", "/manager/attendence"),
        NavLink("Calendar", "/manager/calender"),
        NavLink("Leave Approvals", "/manager/leaveapprovals"),
        NavLink("Projects", "/manager/manager_projects"),
        NavLink("Reports", "/manager/reports"),
        NavLink("Monthly Report", "/manager/manager_monthly_report"),
        NavLink("Resigned Employees", "/manager/resigned_employee"),
        NavLink("Tickets", "/manager/manager_tickets"),
        NavLink("Notice", "/manager/notice"),
        NavLink("Profile", "/manager/profile"),
    ),
    Role.HR: (
        NavLink("Employees", "/hr/employee"),
        NavLink("Onboarding", "/hr/onboardinng"),
        NavLink("Offboarding", "/hr/offboardinng"),
        NavLink("Attendance", "/hr/attendance"),
        NavLink("Leaves", "/hr/leaves"),
        NavLink("Payroll", "/hr/payroll"),
        NavLink("Documents", "/hr/documents"),
        NavLink("Tasks", "/hr/tasks"),
        NavLink("Projects", "/hr/hr_projects"),
        NavLink("Careers", "/hr/hrcareers"),
        NavLink("Petty Cash", "/hr/petty-cash"),
        NavLink("Tickets", "/hr/hr_tickets"),
        NavLink("Notice", "/hr/notice"),
        NavLink("Profile", "/hr/profile"),
    ),
    Role.EMPLOYEE: (
        NavLink("Dashboard", "/employee/dashboard"),
        NavLink("Profile", "/employee/profile"),
        NavLink("Tasks", "/employee/tasks"),
        NavLink("Attendance", "/employee/attendance"),
        NavLink("Leaves", "/employee/leaves"),
        NavLink("Payroll", "/employee/payroll"),
        NavLink("KRA & KPA", "/employee/Kra&Kpa"),
        NavLink("Projects", "/employee/employee_projects"),
        NavLink("Tickets", "/employee/employee_tickets"),
        NavLink("Notice", "/employee/notice"),
        NavLink("Resignation", "/employee/employee_resign"),
    ),
    Role.ADMIN: (
        NavLink("Approvals", "/admin/approvals"),
        NavLink("Attendance", "/admin/attendence"),
        NavLink("Calendar", "/admin/calender"),
        NavLink("Shift & OT", "/admin/admin_shift&ot"),
        NavLink("Projects", "/admin/projects"),
        NavLink("Petty Cash", "/admin/petty-cash"),
        NavLink("Tickets", "/admin/admin_tickets"),
        NavLink("Notice", "/admin/notice"),
        NavLink("System Settings", "/admin/system-settings"),
        NavLink("Profile", "/admin/profile"),
    ),
}

_missing = set(Role) - set(ROLE_NAVIGATION)
if _missing:
    raise RuntimeError(f"navigation missing for roles: {sorted(r.value for r in _missing)}")


def home_path(role: Role) -> str:
    return f"/{role.value}"


def profile_path(role: Role) -> str:
    return f"/{role.value}/profile"


def links_for(role: Role) -> tuple[NavLink, ...]:
    return ROLE_NAVIGATION[role]


def breadcrumbs(path: str) -> list[tuple[str, str]]:
    """(label, href) for each segment of path; empty for the site root."""
    segments = [s for s in (path or "").split("/") if s]
    crumbs = []
    for i, segment in enumerate(segments):
        href = "/" + "/".join(segments[: i + 1])
        label = segment[:1].upper() + segment[1:].replace("-", " ")
        crumbs.append((label, href))
    return crumbs
