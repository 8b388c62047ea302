from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_clock_time, parse_clock_time, parse_iso_date
from ..core.constants import CUSTOM_SHIFT_NAME
from ..core.exceptions import ValidationError
from ..container import Container
from ..reports.model import Period
from ..shifts.model import Shift
from .model import DailyRecord


def _custom_shift_from_args() -> Optional[Shift]:
    start_s = (request.args.get("start_time") or "").strip()
    end_s = (request.args.get("end_time") or "").strip()
    if not start_s or not end_s:
        return None
    try:
        return Shift(name=CUSTOM_SHIFT_NAME, start_time=parse_clock_time(start_s), end_time=parse_clock_time(end_s))
    except ValueError:
        raise ValidationError("start_time/end_time must use HH:MM")


def _period_from_args() -> Optional[Period]:
    start_s = request.args.get("start")
    end_s = request.args.get("end")
    if not start_s or not end_s:
        return None
    try:
        start, end = parse_iso_date(start_s), parse_iso_date(end_s)
    except ValueError:
        raise ValidationError("start/end must use YYYY-MM-DD")
    if end < start:
        raise ValidationError("end must not be before start")
    return Period(start=start, end=end)


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def record_to_dict(r: DailyRecord) -> dict:
    return {
        "employee_id": r.employee_id,
        "employee_name": r.employee_name,
        "date": r.work_date.isoformat(),
        "shift": {
            "name": r.shift.name,
            "start_time": format_clock_time(r.shift.start_time),
            "end_time": format_clock_time(r.shift.end_time),
        },
        "punches": [
            {
                "punch_id": p.punch_id,
                "timestamp": p.timestamp.isoformat(),
                "direction": p.direction.value,
                "manual": p.manual,
                "source_text": p.source_text,
            }
            for p in r.punches
        ],
        "first_in": _iso(r.first_in),
        "last_out": _iso(r.last_out),
        "lateness_minutes": r.lateness_minutes,
        "early_departure_minutes": r.early_departure_minutes,
        "overtime_minutes": r.overtime_minutes,
        "worked_hours": round(r.worked_hours, 4),
        "anomaly": r.anomaly.value,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/records", methods=["GET"], endpoint="daily_records")
    def daily_records():
        records = container.attendance_service.daily_records(custom_shift=_custom_shift_from_args())
        return jsonify([record_to_dict(r) for r in records])

    @app.route("/api/summary", methods=["GET"], endpoint="employee_summary")
    def employee_summary():
        rows = container.attendance_service.employee_summary(custom_shift=_custom_shift_from_args())
        return jsonify(
            [
                {
                    "employee_id": s.employee_id,
                    "employee_name": s.employee_name,
                    "days_worked": s.days_worked,
                    "total_hours": round(s.total_hours, 2),
                    "total_lateness_minutes": s.total_lateness_minutes,
                    "total_overtime_minutes": s.total_overtime_minutes,
                }
                for s in rows
            ]
        )

    @app.route("/api/kpis", methods=["GET"], endpoint="kpis")
    def kpis():
        k = container.attendance_service.kpis(period=_period_from_args(), custom_shift=_custom_shift_from_args())

        def score(s):
            return {"name": s.name, "value": s.value} if s else None

        return jsonify(
            {
                "punctuality_rate": round(k.punctuality_rate, 1),
                "average_lateness": round(k.average_lateness, 1),
                "absenteeism_rate": round(k.absenteeism_rate, 1),
                "best_employee": score(k.best_employee),
                "worst_employee": score(k.worst_employee),
            }
        )
