from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.validators import require_iso_date, require_shift_type
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/breaks/auto-schedule", methods=["POST"], endpoint="api_breaks_auto_schedule")
    def api_breaks_auto_schedule():
        try:
            data = request.get_json(silent=True) or {}
            work_date = require_iso_date(data["date"]) if data.get("date") else today_local()
            shift_type = require_shift_type(data.get("shift_type") or "")

            planned = container.break_scheduling_service.auto_schedule(work_date=work_date, shift_type=shift_type)
            return jsonify(
                {
                    "success": True,
                    "scheduled": len(planned),
                    "breaks": [
                        {
                            "deployment_id": b.deployment_id,
                            "staff_id": b.staff_id,
                            "break_type": b.break_type.value,
                            "duration_minutes": b.duration_minutes,
                            "scheduled_start": b.scheduled_start,
                            "note": b.note,
                        }
                        for b in planned
                    ],
                }
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Break scheduling failed")
            return jsonify({"success": False, "message": "System error while scheduling breaks"}), 500
