from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Anomaly
from ..punches.model import Punch
from ..shifts.model import Shift


@dataclass(frozen=True)
class DailyRecord:
    """Domain read-model: one employee's attendance for one calendar date.

    Recomputed from punches on every aggregation, never stored.
    """

    employee_id: str
    employee_name: str
    work_date: date
    shift: Shift
    punches: tuple[Punch, ...]
    first_in: Optional[datetime]
    last_out: Optional[datetime]
    lateness_minutes: int
    early_departure_minutes: int
    overtime_minutes: int
    worked_hours: float
    anomaly: Anomaly


def classify_anomaly(punch_count: int) -> Anomaly:
    if punch_count == 1:
        return Anomaly.SINGLE_EVENT
    if punch_count > 2:
        return Anomaly.MULTIPLE_EVENTS
    return Anomaly.NONE
