from datetime import date, datetime

import pytest

from src.timeclock_analytics.timeclock_analytics.attendance.aggregator import aggregate
from src.timeclock_analytics.timeclock_analytics.core.enums import Direction
from src.timeclock_analytics.timeclock_analytics.punches.model import Punch
from src.timeclock_analytics.timeclock_analytics.reports.kpi import absenteeism_rate, compute_kpis, working_days
from src.timeclock_analytics.timeclock_analytics.reports.model import EmployeeScore, Period
from src.timeclock_analytics.timeclock_analytics.reports.summary import summarize_by_employee


def _day(emp, name, d, start, end):
    return [
        Punch(employee_id=emp, employee_name=name, timestamp=datetime(2023, 9, d, *start), direction=Direction.IN, source_text=""),
        Punch(employee_id=emp, employee_name=name, timestamp=datetime(2023, 9, d, *end), direction=Direction.OUT, source_text=""),
    ]


@pytest.fixture
def records():
    # 2023-09-04 is a Monday
    punches = (
        _day("1", "Ann", 4, (9, 0), (18, 0))
        + _day("1", "Ann", 5, (9, 5), (18, 30))
        + _day("2", "Bob", 4, (9, 20), (17, 0))
    )
    return aggregate(punches)


def test_empty_records_give_zero_kpis():
    k = compute_kpis([])

    assert k.punctuality_rate == 0
    assert k.average_lateness == 0
    assert k.absenteeism_rate == 0
    assert k.best_employee is None
    assert k.worst_employee is None


def test_kpis(records):
    k = compute_kpis(records)

    assert k.punctuality_rate == pytest.approx(100 / 3)
    assert k.average_lateness == pytest.approx(25 / 3)
    assert k.absenteeism_rate == 0
    assert k.best_employee == EmployeeScore(name="Ann", value=5)
    assert k.worst_employee == EmployeeScore(name="Bob", value=20)


def test_working_days_skip_weekends_and_holidays():
    period = Period(start=date(2023, 9, 1), end=date(2023, 9, 5))

    assert list(working_days(period, holidays={date(2023, 9, 5)})) == [date(2023, 9, 1), date(2023, 9, 4)]


def test_absenteeism_rate(records):
    # Mon-Tue for two employees: Bob misses Tuesday
    period = Period(start=date(2023, 9, 4), end=date(2023, 9, 5))

    assert absenteeism_rate(records, period) == pytest.approx(25.0)
    assert absenteeism_rate(records, period, holidays={date(2023, 9, 5)}) == 0
    assert compute_kpis(records, period=period).absenteeism_rate == pytest.approx(25.0)


def test_summary_by_employee(records):
    rows = summarize_by_employee(records)

    assert [r.employee_name for r in rows] == ["Ann", "Bob"]
    ann = rows[0]
    assert ann.days_worked == 2
    assert ann.total_hours == pytest.approx((540 + 565) / 60)
    assert ann.total_lateness_minutes == 5
    assert ann.total_overtime_minutes == 30
    assert rows[1].total_lateness_minutes == 20
