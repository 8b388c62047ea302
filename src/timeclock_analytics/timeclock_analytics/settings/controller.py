from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container
from .model import Settings


def settings_to_dict(s: Settings) -> dict:
    return {
        "deduct_lunch_break": s.deduct_lunch_break,
        "lunch_break_threshold_minutes": s.lunch_break_threshold_minutes,
        "holidays": sorted(d.isoformat() for d in s.holidays),
    }


def settings_from_payload(payload: dict, current: Settings) -> Settings:
    """Validate at the HTTP edge; the aggregation code trusts what it gets."""
    deduct = payload.get("deduct_lunch_break", current.deduct_lunch_break)
    if not isinstance(deduct, bool):
        raise ValidationError("deduct_lunch_break must be a boolean")

    threshold = payload.get("lunch_break_threshold_minutes", current.lunch_break_threshold_minutes)
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
        raise ValidationError("lunch_break_threshold_minutes must be a non-negative integer")

    holidays = current.holidays
    if "holidays" in payload:
        raw = payload["holidays"]
        if not isinstance(raw, list):
            raise ValidationError("holidays must be a list of YYYY-MM-DD dates")
        try:
            holidays = frozenset(parse_iso_date(str(v)) for v in raw)
        except ValueError:
            raise ValidationError("holidays must be a list of YYYY-MM-DD dates")

    return Settings(deduct_lunch_break=deduct, lunch_break_threshold_minutes=threshold, holidays=holidays)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    def get_settings():
        return jsonify(settings_to_dict(container.settings_repo.get()))

    @app.route("/api/settings", methods=["PUT"], endpoint="update_settings")
    def update_settings():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError("Expected a JSON object")
        updated = settings_from_payload(payload, container.settings_repo.get())
        container.settings_repo.save(updated)
        return jsonify(settings_to_dict(updated))
