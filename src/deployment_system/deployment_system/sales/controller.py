from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.validators import require_iso_date
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sales/preview", methods=["POST"], endpoint="api_sales_preview")
    def api_sales_preview():
        """Parse pasted forecast text without storing anything."""
        try:
            data = request.get_json(silent=True) or {}
            preview = container.sales_import_service.preview(data.get("data"))
            return jsonify(
                {
                    "success": True,
                    "report": asdict(preview.report),
                    "validation": asdict(preview.validation),
                    "summary": preview.summary,
                }
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Sales preview failed")
            return jsonify({"success": False, "message": "System error while reading sales data"}), 500

    @app.route("/api/sales/import", methods=["POST"], endpoint="api_sales_import")
    def api_sales_import():
        try:
            data = request.get_json(silent=True) or {}
            work_date = require_iso_date(data["date"]) if data.get("date") else today_local()
            written = container.sales_import_service.import_for_date(data.get("data"), work_date=work_date)
            return jsonify({"success": True, "date": work_date.isoformat(), "imported": written}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Sales import failed")
            return jsonify({"success": False, "message": "System error while importing sales data"}), 500

    @app.route("/api/sales/<work_date>", methods=["GET"], endpoint="api_sales_for_date")
    def api_sales_for_date(work_date: str):
        try:
            day = require_iso_date(work_date)
            records = container.sales_import_service.records_for_date(day)
            return jsonify(
                {
                    "success": True,
                    "date": day.isoformat(),
                    "records": [{"time": r.time, "forecast": r.forecast} for r in records],
                }
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Loading sales records failed")
            return jsonify({"success": False, "message": "System error while loading sales data"}), 500
