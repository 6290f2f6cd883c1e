from __future__ import annotations

from flask import Flask, jsonify, request

from ..breaks.calculator.statutory_calculator import break_type_for, calculate_break_time
from ..breaks.work_hours import calculate_work_hours
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..shifts.classifier import classify_shift
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _shift_times(data: dict) -> tuple[str, str]:
        start = require_non_empty(str(data.get("start") or ""), "start")
        end = require_non_empty(str(data.get("end") or ""), "end")
        return start, end

    @app.route("/api/shifts/classify", methods=["POST"], endpoint="api_shifts_classify")
    def api_shifts_classify():
        try:
            start, end = _shift_times(request.get_json(silent=True) or {})
            return jsonify({"success": True, "shift_type": classify_shift(start, end).value}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/shifts/breaks", methods=["POST"], endpoint="api_shifts_breaks")
    def api_shifts_breaks():
        try:
            data = request.get_json(silent=True) or {}
            start, end = _shift_times(data)
            is_under_18 = bool(data.get("is_under_18", False))

            work_hours = calculate_work_hours(start, end)
            minutes = calculate_break_time(is_under_18, work_hours)
            return jsonify(
                {
                    "success": True,
                    "work_hours": round(work_hours, 2),
                    "break_minutes": minutes,
                    "break_type": break_type_for(is_under_18, work_hours).value if minutes else None,
                }
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
