from datetime import datetime

from src.timeclock_analytics.timeclock_analytics.attendance.calculator.standard_calculator import StandardWorkedTimeCalculator
from src.timeclock_analytics.timeclock_analytics.core.enums import Direction
from src.timeclock_analytics.timeclock_analytics.punches.model import Punch
from src.timeclock_analytics.timeclock_analytics.settings.model import Settings


def _p(h, m, direction):
    return Punch(employee_id="1", employee_name="A", timestamp=datetime(2025, 1, 1, h, m), direction=direction, source_text="")


def test_standard_calculator_subtracts_long_break():
    punches = [_p(8, 0, Direction.IN), _p(12, 0, Direction.OUT), _p(13, 0, Direction.IN), _p(17, 0, Direction.OUT)]

    calc = StandardWorkedTimeCalculator()
    minutes = calc.worked_minutes(
        punches,
        first_in=punches[0].timestamp,
        last_out=punches[-1].timestamp,
        settings=Settings(deduct_lunch_break=True),
    )

    assert minutes == 8 * 60


def test_gap_equal_to_threshold_is_kept():
    punches = [_p(8, 0, Direction.IN), _p(12, 0, Direction.OUT), _p(12, 45, Direction.IN), _p(17, 0, Direction.OUT)]

    assert StandardWorkedTimeCalculator.break_minutes(punches, Settings(deduct_lunch_break=True)) == 0


def test_in_to_out_gaps_are_not_breaks():
    punches = [_p(8, 0, Direction.IN), _p(9, 0, Direction.IN), _p(12, 0, Direction.OUT), _p(17, 0, Direction.OUT)]

    assert StandardWorkedTimeCalculator.break_minutes(punches, Settings(deduct_lunch_break=True)) == 0


def test_missing_out_means_no_worked_time():
    calc = StandardWorkedTimeCalculator()

    assert calc.worked_minutes([_p(8, 0, Direction.IN)], first_in=datetime(2025, 1, 1, 8, 0), last_out=None, settings=None) == 0
