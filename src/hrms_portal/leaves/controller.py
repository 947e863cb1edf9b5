from __future__ import annotations

import traceback
from typing import Optional

from flask import Flask, flash, redirect, render_template, request, send_file

from ..container import Container
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AccountsError, ValidationError
from ..shell.guard import current_session, role_required

EMPLOYEE_LEAVES_PATH = "/employee/leaves"
MANAGER_APPROVALS_PATH = "/manager/leaveapprovals"
HR_LEAVES_PATH = "/hr/leaves"

_FILTERS = ["All"] + [s.value for s in LeaveStatus]


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    def _status_filter() -> tuple[str, Optional[LeaveStatus]]:
        selected = request.args.get("status", "All")
        if selected not in _FILTERS:
            selected = "All"
        return selected, (None if selected == "All" else LeaveStatus(selected))

    @app.route(EMPLOYEE_LEAVES_PATH, methods=["GET", "POST"], endpoint="employee_leaves")
    @role_required(container, Role.EMPLOYEE)
    def employee_leaves():
        s = current_session()
        if s is None:
            return render_template(
                "leaves/employee.html",
                leaves=[],
                error="User info not found. Please login again.",
            )

        if request.method == "POST":
            try:
                service.apply(
                    s,
                    reason=request.form.get("reason", ""),
                    start_date=request.form.get("start_date", ""),
                    end_date=request.form.get("end_date", ""),
                )
                flash("Leave request submitted.", "success")
                return redirect(EMPLOYEE_LEAVES_PATH)
            except ValidationError as e:
                flash(str(e), "danger")
            except AccountsError as e:
                flash(f"Failed to submit leave request: {e}", "danger")

        leaves, error = [], None
        try:
            leaves = service.list_for(s.email)
        except AccountsError:
            error = "Could not load your leave requests."
        return render_template("leaves/employee.html", leaves=leaves, error=error, form=request.form)

    def _approvals_page(*, path: str, can_export: bool):
        selected, status = _status_filter()
        leaves, error = [], None
        try:
            all_leaves = service.list_all()
            leaves = [lr for lr in all_leaves if status is None or lr.status is status]
            counts = service.summarize(all_leaves)
        except AccountsError:
            error = "Could not load leave requests."
            counts = service.summarize([])
        return render_template(
            "leaves/approvals.html",
            leaves=leaves,
            counts=counts,
            filters=_FILTERS,
            selected=selected,
            error=error,
            base_path=path,
            can_export=can_export,
        )

    def _decide(path: str, leave_id: int):
        try:
            service.decide(leave_id=leave_id, status=request.form.get("status", ""))
            flash(f"Leave {request.form.get('status')} successfully!", "success")
        except ValidationError as e:
            flash(str(e), "danger")
        except AccountsError as e:
            flash(f"Failed to update leave status: {e}", "danger")
        except Exception:
            traceback.print_exc()
            flash("System error while updating leave status", "danger")
        return redirect(path)

    @app.route(MANAGER_APPROVALS_PATH, endpoint="manager_leave_approvals")
    @role_required(container, Role.MANAGER)
    def manager_leave_approvals():
        return _approvals_page(path=MANAGER_APPROVALS_PATH, can_export=True)

    @app.route(f"{MANAGER_APPROVALS_PATH}/<int:leave_id>", methods=["POST"], endpoint="manager_decide_leave")
    @role_required(container, Role.MANAGER)
    def manager_decide_leave(leave_id: int):
        return _decide(MANAGER_APPROVALS_PATH, leave_id)

    @app.route(f"{MANAGER_APPROVALS_PATH}/export.xlsx", endpoint="manager_export_leaves")
    @role_required(container, Role.MANAGER)
    def manager_export_leaves():
        _, status = _status_filter()
        try:
            leaves = service.list_all(status=status)
            out = service.export_xlsx(leaves)
        except AccountsError as e:
            flash(f"Export failed: {e}", "danger")
            return redirect(MANAGER_APPROVALS_PATH)
        return send_file(
            out,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name="leave_requests.xlsx",
        )

    @app.route(HR_LEAVES_PATH, endpoint="hr_leaves")
    @role_required(container, Role.HR)
    def hr_leaves():
        return _approvals_page(path=HR_LEAVES_PATH, can_export=False)

    @app.route(f"{HR_LEAVES_PATH}/<int:leave_id>", methods=["POST"], endpoint="hr_decide_leave")
    @role_required(container, Role.HR)
    def hr_decide_leave(leave_id: int):
        return _decide(HR_LEAVES_PATH, leave_id)
