from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import date_key, parse_optional_date
from ..common.web import current_role, error_response, login_required, roles_required, system_error_response
from ..core.constants import HR_ADMIN_ROLES
from ..core.exceptions import DomainError, MissingFieldError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @login_required
    def list_holidays():
        holidays = container.holiday_service.list_holidays()
        return jsonify(
            {
                "holidays": [
                    {
                        "holiday_id": h.holiday_id,
                        "date": date_key(h.holiday_date),
                        "name": h.name,
                        "description": h.description or "",
                    }
                    for h in holidays
                ]
            }
        )

    @app.route("/api/holidays/check", methods=["GET"], endpoint="check_holiday")
    @login_required
    def check_holiday():
        try:
            day = parse_optional_date(request.args.get("date"))
            if not day:
                raise MissingFieldError("date is required")
        except DomainError as e:
            return error_response(e)
        excluded = container.working_day_calculator.is_date_excluded(day, container.holiday_service.holiday_set())
        return jsonify({"date": date_key(day), "excluded": excluded})

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @roles_required(HR_ADMIN_ROLES)
    def add_holiday():
        data = request.get_json(silent=True) or request.form.to_dict()
        try:
            holiday_id = container.holiday_service.add_holiday(
                current_role=current_role(),
                holiday_date=parse_optional_date(data.get("date")),
                name=data.get("name", ""),
                description=data.get("description", ""),
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error_response("Failed to add holiday")
        return jsonify({"holiday_id": holiday_id, "message": "Holiday added successfully"}), 201

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @roles_required(HR_ADMIN_ROLES)
    def delete_holiday(holiday_id: int):
        try:
            container.holiday_service.delete_holiday(current_role=current_role(), holiday_id=holiday_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Holiday deleted"})

    @app.route("/api/holidays/import", methods=["POST"], endpoint="import_holidays")
    @roles_required(HR_ADMIN_ROLES)
    def import_holidays():
        data = request.get_json(silent=True) or {}
        try:
            try:
                year = int(data.get("year") or date.today().year)
            except (TypeError, ValueError):
                raise ValidationError("year must be a number")
            added = container.holiday_service.import_national_holidays(current_role=current_role(), year=year)
        except DomainError as e:
            return error_response(e)
        except Exception:
            return system_error_response("Failed to import holidays")
        if added:
            message = f"Added {added} holidays for {year}"
        else:
            message = f"All national holidays for {year} are already added"
        return jsonify({"added": added, "message": message})
