from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_iso_date, require_non_empty, require_positive_id
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route(
        "/api/schedules/<int:schedule_id>/employees/<int:employee_id>/shifts",
        methods=["POST"],
        endpoint="api_schedule_import_line",
    )
    def api_schedule_import_line(schedule_id: int, employee_id: int):
        """Store one rota line ("9:00a - 5:00p  --  ...") for a schedule employee."""
        try:
            data = request.get_json(silent=True) or {}
            added = container.schedule_import_service.import_week_line(
                schedule_id=require_positive_id(schedule_id, "schedule_id"),
                employee_id=require_positive_id(employee_id, "employee_id"),
                line=require_non_empty(str(data.get("line") or ""), "line"),
                week_start=require_iso_date(data.get("week_start") or "", "week_start"),
            )
            return jsonify({"success": True, "added": added}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Schedule line import failed")
            return jsonify({"success": False, "message": "System error while importing the schedule"}), 500

    @app.route("/api/schedules/<int:schedule_id>/match-staff", methods=["POST"], endpoint="api_schedule_match_staff")
    def api_schedule_match_staff(schedule_id: int):
        try:
            matches = container.auto_assignment_service.match_employees_to_staff(schedule_id)
            return jsonify({"success": True, "matches": matches}), 200
        except Exception:
            app.logger.exception("Staff matching failed for schedule %s", schedule_id)
            return jsonify({"success": False, "message": "System error while matching staff"}), 500

    @app.route("/api/schedules/<int:schedule_id>/auto-assign", methods=["POST"], endpoint="api_schedule_auto_assign")
    def api_schedule_auto_assign(schedule_id: int):
        try:
            results = container.auto_assignment_service.auto_assign(schedule_id)
            return jsonify({"success": True, "results": results.as_dict()}), 200
        except Exception:
            app.logger.exception("Auto-assignment failed for schedule %s", schedule_id)
            return jsonify({"success": False, "message": "System error during auto-assignment"}), 500
