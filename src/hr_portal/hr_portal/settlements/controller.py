from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_role, error_response, roles_required, system_error_response
from ..core.constants import HR_ADMIN_ROLES
from ..core.exceptions import DomainError
from ..container import Container
from .model import Settlement
from .service import parse_components


def settlement_to_dict(s: Settlement) -> dict:
    row = {
        "settlement_id": s.settlement_id,
        "employee_id": s.employee_id,
        "employee_name": s.employee_name,
        "employee_code": s.employee_code,
        "status": s.status.value,
        "remarks": s.remarks or "",
        "created_at": s.created_at.strftime("%Y-%m-%d %H:%M"),
    }
    for name in s.components.__dataclass_fields__:
        row[name] = str(getattr(s.components, name))
    row["total_payable"] = str(s.totals.total_payable)
    row["total_deductions"] = str(s.totals.total_deductions)
    row["net_settlement"] = str(s.totals.net_settlement)
    return row


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/settlements", methods=["GET"], endpoint="list_settlements")
    @roles_required(HR_ADMIN_ROLES)
    def list_settlements():
        try:
            rows = container.settlement_service.list_settlements(current_role=current_role())
        except DomainError as e:
            return error_response(e)
        return jsonify({"settlements": [settlement_to_dict(s) for s in rows]})

    @app.route("/api/admin/settlements", methods=["POST"], endpoint="create_settlement")
    @roles_required(HR_ADMIN_ROLES)
    def create_settlement():
        data = request.get_json(silent=True) or request.form.to_dict()
        try:
            components = parse_components(data)
            settlement_id = container.settlement_service.create_draft(
                current_role=current_role(),
                employee_id=str(data.get("employee_id") or ""),
                components=components,
                remarks=data.get("remarks"),
            )
            totals = container.settlement_service.preview(components)
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error_response("Failed to calculate settlement")
        return (
            jsonify(
                {
                    "settlement_id": settlement_id,
                    "total_payable": str(totals.total_payable),
                    "total_deductions": str(totals.total_deductions),
                    "net_settlement": str(totals.net_settlement),
                    "message": "Settlement calculated successfully",
                }
            ),
            201,
        )
