"""Example: use the service layer directly (no Flask).

Usage: python -m examples.example_usage path/to/export.txt [more exports...]
"""

import importlib
import sys
from pathlib import Path

from config import get_settings_module

from src.timeclock_analytics.timeclock_analytics.container import build_container
from src.timeclock_analytics.timeclock_analytics.core.exceptions import DomainError


def main(paths):
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        defaults={
            "deduct_lunch_break": settings.DEFAULT_DEDUCT_LUNCH_BREAK,
            "lunch_break_threshold_minutes": settings.DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES,
        }
    )

    for path in paths:
        try:
            outcome = container.import_service.import_file(Path(path).name, Path(path).read_bytes())
        except DomainError as e:
            print(f"{path}: {e}")
            continue
        print(f"{path}: {outcome.added} added, {outcome.duplicates} duplicates, {outcome.rejected} rejected")

    for r in container.attendance_service.daily_records():
        print(
            f"{r.work_date} {r.employee_name:<25} {r.shift.name:<10} "
            f"late={r.lateness_minutes:>3} early={r.early_departure_minutes:>3} "
            f"ot={r.overtime_minutes:>3} hours={r.worked_hours:.2f} {r.anomaly.value}"
        )


if __name__ == "__main__":
    main(sys.argv[1:])
