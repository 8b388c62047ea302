from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Iterator, Optional, Sequence

from ..attendance.model import DailyRecord
from .model import EmployeeScore, KpiSummary, Period

SATURDAY = 5


def working_days(period: Period, holidays: Iterable[date] = ()) -> Iterator[date]:
    """Weekdays of the period (inclusive) that are not holidays."""
    skip = set(holidays)
    day = period.start
    while day <= period.end:
        if day.weekday() < SATURDAY and day not in skip:
            yield day
        day += timedelta(days=1)


def absenteeism_rate(records: Sequence[DailyRecord], period: Period, holidays: Iterable[date] = ()) -> float:
    """Share (in %) of expected working days without any record, per employee seen."""
    days = list(working_days(period, holidays))
    employee_ids = {r.employee_id for r in records}
    if not days or not employee_ids:
        return 0.0

    present = {(r.employee_id, r.work_date) for r in records}
    absences = sum(1 for emp in employee_ids for d in days if (emp, d) not in present)
    return absences / (len(days) * len(employee_ids)) * 100


def compute_kpis(
    records: Sequence[DailyRecord],
    *,
    period: Optional[Period] = None,
    holidays: Iterable[date] = (),
) -> KpiSummary:
    if not records:
        return KpiSummary(punctuality_rate=0.0, average_lateness=0.0, absenteeism_rate=0.0)

    on_time = sum(1 for r in records if r.lateness_minutes == 0)
    total_lateness = sum(r.lateness_minutes for r in records)

    lateness_by_name: dict[str, int] = {}
    for r in records:
        lateness_by_name[r.employee_name] = lateness_by_name.get(r.employee_name, 0) + r.lateness_minutes
    # Stable sort keeps first-seen order between equal totals.
    ranking = sorted(lateness_by_name.items(), key=lambda item: item[1])

    return KpiSummary(
        punctuality_rate=on_time / len(records) * 100,
        average_lateness=total_lateness / len(records),
        absenteeism_rate=absenteeism_rate(records, period, holidays) if period else 0.0,
        best_employee=EmployeeScore(*ranking[0]),
        worst_employee=EmployeeScore(*ranking[-1]),
    )
