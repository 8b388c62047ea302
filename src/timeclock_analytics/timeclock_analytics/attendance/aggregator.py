from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import minutes_of_day
from ..core.enums import Direction
from ..punches.model import Punch
from ..settings.model import Settings
from ..shifts.model import Shift
from ..shifts.policy import ShiftResolutionPolicy, TemplateShiftPolicy
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator
from .model import DailyRecord, classify_anomaly

logger = logging.getLogger(__name__)


def group_by_employee_day(punches: Iterable[Punch]) -> dict[tuple[str, date], list[Punch]]:
    buckets: dict[tuple[str, date], list[Punch]] = defaultdict(list)
    for p in punches:
        buckets[(p.employee_id, p.timestamp.date())].append(p)
    return dict(buckets)


class DailyAggregator:
    """Project punches into one DailyRecord per (employee, calendar day)."""

    def __init__(
        self,
        *,
        shift_policy: ShiftResolutionPolicy | None = None,
        calculator: WorkedTimeCalculator | None = None,
    ):
        self._shift_policy = shift_policy or TemplateShiftPolicy()
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def aggregate(
        self,
        punches: Iterable[Punch],
        custom_shift: Optional[Shift] = None,
        settings: Optional[Settings] = None,
    ) -> list[DailyRecord]:
        buckets = group_by_employee_day(punches)
        records = [
            self.build_record(employee_id, work_date, bucket, custom_shift=custom_shift, settings=settings)
            for (employee_id, work_date), bucket in buckets.items()
        ]
        records.sort(key=lambda r: (r.work_date, r.employee_name.casefold(), r.employee_name, r.employee_id))
        logger.debug("aggregated %d daily records", len(records))
        return records

    def build_record(
        self,
        employee_id: str,
        work_date: date,
        bucket: Sequence[Punch],
        *,
        custom_shift: Optional[Shift] = None,
        settings: Optional[Settings] = None,
    ) -> DailyRecord:
        ordered = tuple(sorted(bucket, key=lambda p: p.timestamp))
        first_in = _first_of(ordered, Direction.IN)
        last_out = _last_of(ordered, Direction.OUT)

        shift = self._shift_policy.resolve(first_in=first_in, custom=custom_shift)
        shift_start = minutes_of_day(shift.start_time)
        shift_end = minutes_of_day(shift.end_time)

        lateness = 0
        if first_in is not None:
            lateness = max(0, minutes_of_day(first_in) - shift_start)

        early_departure = 0
        overtime = 0
        if last_out is not None:
            early_departure = max(0, shift_end - minutes_of_day(last_out))
            overtime = max(0, minutes_of_day(last_out) - shift_end)

        worked = self._calculator.worked_minutes(ordered, first_in=first_in, last_out=last_out, settings=settings)

        return DailyRecord(
            employee_id=employee_id,
            employee_name=ordered[0].employee_name,
            work_date=work_date,
            shift=shift,
            punches=ordered,
            first_in=first_in,
            last_out=last_out,
            lateness_minutes=lateness,
            early_departure_minutes=early_departure,
            overtime_minutes=overtime,
            worked_hours=max(0, worked) / 60,
            anomaly=classify_anomaly(len(ordered)),
        )


def _first_of(ordered: Sequence[Punch], direction: Direction) -> Optional[datetime]:
    for p in ordered:
        if p.direction == direction:
            return p.timestamp
    return None


def _last_of(ordered: Sequence[Punch], direction: Direction) -> Optional[datetime]:
    for p in reversed(ordered):
        if p.direction == direction:
            return p.timestamp
    return None


def aggregate(
    punches: Iterable[Punch],
    custom_shift: Optional[Shift] = None,
    settings: Optional[Settings] = None,
) -> list[DailyRecord]:
    return DailyAggregator().aggregate(punches, custom_shift, settings)
