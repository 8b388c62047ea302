from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.datetime_utils import parse_iso_date
from .core.exceptions import ValidationError
from .container import build_container
from .attendance.controller import register as register_attendance
from .imports.controller import register as register_imports
from .settings.controller import register as register_settings


def _parse_holidays(value: str) -> list:
    return [parse_iso_date(part.strip()) for part in (value or "").split(",") if part.strip()]


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_BYTES", 16 * 1024 * 1024))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger(__name__)

    container = build_container(
        defaults={
            "deduct_lunch_break": getattr(settings, "DEFAULT_DEDUCT_LUNCH_BREAK", False),
            "lunch_break_threshold_minutes": getattr(settings, "DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES", 45),
            "holidays": _parse_holidays(getattr(settings, "DEFAULT_HOLIDAYS", "")),
            "rejection_sample_size": getattr(settings, "REJECTION_SAMPLE_SIZE", 5),
        }
    )
    app.extensions["timeclock_container"] = container

    @app.errorhandler(ValidationError)
    def validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    register_imports(app, container)
    register_attendance(app, container)
    register_settings(app, container)

    logger.info("timeclock-analytics ready (settings=%s)", settings_module)
    return app
