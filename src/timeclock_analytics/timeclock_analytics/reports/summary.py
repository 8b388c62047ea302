from __future__ import annotations

from typing import Iterable

from ..attendance.model import DailyRecord
from .model import EmployeeSummary


def summarize_by_employee(records: Iterable[DailyRecord]) -> list[EmployeeSummary]:
    totals: dict[str, dict] = {}
    for r in records:
        s = totals.get(r.employee_id)
        if not s:
            s = {
                "employee_name": r.employee_name,
                "days_worked": 0,
                "total_hours": 0.0,
                "total_lateness_minutes": 0,
                "total_overtime_minutes": 0,
            }
            totals[r.employee_id] = s
        s["days_worked"] += 1
        s["total_hours"] += r.worked_hours
        s["total_lateness_minutes"] += r.lateness_minutes
        s["total_overtime_minutes"] += r.overtime_minutes

    summary = [EmployeeSummary(employee_id=emp_id, **s) for emp_id, s in totals.items()]
    summary.sort(key=lambda s: (s.employee_name, s.employee_id))
    return summary
