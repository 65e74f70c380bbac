from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.web import (
    current_gender,
    current_role,
    current_user_id,
    error_response,
    login_required,
    roles_required,
    system_error_response,
)
from ..core.constants import HR_ADMIN_ROLES, LEAVE_DECIDER_ROLES
from ..core.enums import RequestStatus
from ..core.exceptions import DomainError, MissingFieldError, ValidationError
from ..container import Container
from .model import LeaveRequest
from .policy import LEAVE_TYPE_NAMES


def leave_to_dict(leave: LeaveRequest) -> dict:
    return {
        "request_id": leave.request_id,
        "employee_id": leave.employee_id,
        "employee_name": leave.employee_name,
        "employee_code": leave.employee_code,
        "leave_type": leave.leave_type.value,
        "leave_type_name": LEAVE_TYPE_NAMES[leave.leave_type],
        "start_date": leave.start_date.strftime("%Y-%m-%d"),
        "end_date": leave.end_date.strftime("%Y-%m-%d"),
        "duration": leave.duration,
        "reason": leave.reason,
        "status": leave.status.value,
        "is_paid": leave.is_paid,
        "approver_ids": list(leave.approver_ids),
        "applied_at": leave.applied_at.strftime("%Y-%m-%d %H:%M"),
        "decided_by": leave.decided_by,
        "decided_at": leave.decided_at.strftime("%Y-%m-%d %H:%M") if leave.decided_at else None,
        "notes": leave.notes or "",
    }


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        return request.get_json(silent=True) or request.form.to_dict()

    @app.route("/api/leaves", methods=["GET"], endpoint="my_leaves")
    @login_required
    def my_leaves():
        leaves = container.leave_service.list_my_leaves(employee_id=current_user_id())
        return jsonify({"leaves": [leave_to_dict(x) for x in leaves]})

    @app.route("/api/leaves", methods=["POST"], endpoint="submit_leave")
    @login_required
    def submit_leave():
        data = _payload()
        try:
            request_id = container.leave_service.submit(
                employee_id=current_user_id(),
                leave_type=data.get("leave_type"),
                start_date=parse_optional_date(data.get("start_date")),
                end_date=parse_optional_date(data.get("end_date")),
                reason=data.get("reason", ""),
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error_response("Failed to submit leave application")
        return jsonify({"request_id": request_id, "message": "Leave application submitted successfully"}), 201

    @app.route("/api/leaves/types", methods=["GET"], endpoint="leave_types")
    @login_required
    def leave_types():
        options = container.leave_service.leave_type_options(employee_id=current_user_id(), gender=current_gender())
        return jsonify({"types": options})

    @app.route("/api/leaves/balance", methods=["GET"], endpoint="my_leave_balance")
    @login_required
    def my_leave_balance():
        balance = container.leave_service.get_balance(employee_id=current_user_id())
        return jsonify({"balance": {t.value: q for t, q in balance.quantities.items()}})

    @app.route("/api/leaves/preview", methods=["GET"], endpoint="preview_leave")
    @login_required
    def preview_leave():
        try:
            start_date = parse_optional_date(request.args.get("start_date"))
            end_date = parse_optional_date(request.args.get("end_date"))
            if not start_date or not end_date:
                raise MissingFieldError("start_date and end_date are required")
            summary = container.leave_service.preview_duration(start_date=start_date, end_date=end_date)
        except DomainError as e:
            return error_response(e)
        return jsonify(
            {
                "total": summary.total,
                "excluded": summary.excluded,
                "working": summary.working,
                "summary": summary.describe(),
            }
        )

    @app.route("/api/admin/leaves", methods=["GET"], endpoint="admin_leaves")
    @roles_required(LEAVE_DECIDER_ROLES)
    def admin_leaves():
        try:
            raw_status = (request.args.get("status") or "").strip().upper()
            try:
                status = RequestStatus(raw_status) if raw_status else None
            except ValueError:
                raise ValidationError(f"Unknown status: {raw_status}")
            leaves = container.leave_approval_service.list_leaves(current_role=current_role(), status=status)
        except DomainError as e:
            return error_response(e)
        return jsonify({"leaves": [leave_to_dict(x) for x in leaves]})

    @app.route("/api/admin/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @roles_required(LEAVE_DECIDER_ROLES)
    def approve_leave(request_id: int):
        try:
            container.leave_approval_service.approve(
                current_role=current_role(),
                approver_id=current_user_id(),
                request_id=int(request_id),
                notes=_payload().get("notes", ""),
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error_response("Failed to approve leave")
        return jsonify({"message": "Leave approved and balance updated"})

    @app.route("/api/admin/leaves/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @roles_required(LEAVE_DECIDER_ROLES)
    def reject_leave(request_id: int):
        try:
            container.leave_approval_service.reject(
                current_role=current_role(),
                approver_id=current_user_id(),
                request_id=int(request_id),
                notes=_payload().get("notes", ""),
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error_response("Failed to reject leave")
        return jsonify({"message": "Leave rejected"})

    @app.route("/api/admin/leave-balances", methods=["GET"], endpoint="admin_leave_balances")
    @roles_required(HR_ADMIN_ROLES)
    def admin_leave_balances():
        try:
            rows = container.leave_balance_service.list_employee_balances(current_role=current_role())
        except DomainError as e:
            return error_response(e)
        return jsonify(
            {
                "employees": rows,
                "can_allocate": container.leave_balance_service.can_allocate(),
            }
        )

    @app.route("/api/admin/leave-balances/<employee_id>", methods=["PUT"], endpoint="update_leave_balance")
    @roles_required(HR_ADMIN_ROLES)
    def update_leave_balance(employee_id: str):
        try:
            balance = container.leave_balance_service.update_balance(
                current_role=current_role(),
                employee_id=employee_id,
                quantities=_payload(),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify({"balance": {t.value: q for t, q in balance.quantities.items()}})

    @app.route("/api/admin/leave-balances/allocate", methods=["POST"], endpoint="allocate_leaves")
    @roles_required(HR_ADMIN_ROLES)
    def allocate_leaves():
        try:
            count = container.leave_balance_service.allocate_monthly(current_role=current_role())
        except DomainError as e:
            return error_response(e)
        return jsonify({"allocated": count, "message": "Monthly leaves allocated to all employees successfully"})
