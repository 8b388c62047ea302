from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Period:
    start: date
    end: date


@dataclass(frozen=True)
class EmployeeScore:
    name: str
    value: int


@dataclass(frozen=True)
class KpiSummary:
    punctuality_rate: float
    average_lateness: float
    absenteeism_rate: float
    best_employee: Optional[EmployeeScore] = None
    worst_employee: Optional[EmployeeScore] = None


@dataclass(frozen=True)
class EmployeeSummary:
    """Cumulated figures for one employee over the records given."""

    employee_id: str
    employee_name: str
    days_worked: int
    total_hours: float
    total_lateness_minutes: int
    total_overtime_minutes: int
