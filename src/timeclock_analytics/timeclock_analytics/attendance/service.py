from __future__ import annotations

from typing import Optional

from ..punches.repository import PunchRepository
from ..reports.kpi import compute_kpis
from ..reports.model import EmployeeSummary, KpiSummary, Period
from ..reports.summary import summarize_by_employee
from ..settings.repository import SettingsRepository
from ..shifts.model import Shift
from .aggregator import DailyAggregator
from .model import DailyRecord


class AttendanceService:
    """Daily records and reports over every stored punch."""

    def __init__(
        self,
        punches: PunchRepository,
        settings: SettingsRepository,
        *,
        aggregator: DailyAggregator | None = None,
    ):
        self._punches = punches
        self._settings = settings
        self._aggregator = aggregator or DailyAggregator()

    def daily_records(self, *, custom_shift: Optional[Shift] = None) -> list[DailyRecord]:
        return self._aggregator.aggregate(self._punches.list_all(), custom_shift, self._settings.get())

    def employee_summary(self, *, custom_shift: Optional[Shift] = None) -> list[EmployeeSummary]:
        return summarize_by_employee(self.daily_records(custom_shift=custom_shift))

    def kpis(self, *, period: Optional[Period] = None, custom_shift: Optional[Shift] = None) -> KpiSummary:
        records = self.daily_records(custom_shift=custom_shift)
        return compute_kpis(records, period=period, holidays=self._settings.get().holidays)
