from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .breaks.controller import register as register_breaks
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .deployments.controller import register as register_deployments
from .sales.controller import register as register_sales
from .shifts.controller import register as register_shifts


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if app.config["DEBUG"]:
        print(
            "[deployment-system] settings=", settings_module,
            " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            if app.config["DEBUG"]:
                print(f"[deployment-system] schema ready (tables={len(list_tables(db_config))})")

        container = build_container(
            db_config=db_config,
            max_per_shift=int(getattr(settings, "MAX_DEPLOYMENTS_PER_SHIFT", 2)),
            sales_tolerance=float(getattr(settings, "SALES_TOLERANCE", 0.01)),
        )

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_shifts(app, container)
    register_sales(app, container)
    register_deployments(app, container)
    register_breaks(app, container)

    return app
