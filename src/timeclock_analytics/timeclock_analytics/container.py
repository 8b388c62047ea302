from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.aggregator import DailyAggregator
from .attendance.service import AttendanceService
from .imports.service import ImportService
from .parsers.factory import PunchParserFactory
from .punches.memory_repository import InMemoryPunchRepository
from .settings.model import Settings
from .settings.repository import InMemorySettingsRepository
from .shifts.policy import TemplateShiftPolicy


@dataclass(frozen=True)
class Container:
    punches_repo: InMemoryPunchRepository
    settings_repo: InMemorySettingsRepository

    import_service: ImportService
    attendance_service: AttendanceService


def build_container(*, defaults: Mapping[str, Any]) -> Container:
    initial = Settings(
        deduct_lunch_break=bool(defaults.get("deduct_lunch_break", False)),
        lunch_break_threshold_minutes=int(defaults.get("lunch_break_threshold_minutes", 45)),
        holidays=frozenset(defaults.get("holidays", ())),
    )

    punches_repo = InMemoryPunchRepository()
    settings_repo = InMemorySettingsRepository(initial)

    import_service = ImportService(
        punches_repo,
        parser_factory=PunchParserFactory(sample_size=int(defaults.get("rejection_sample_size", 5))),
    )
    attendance_service = AttendanceService(
        punches_repo,
        settings_repo,
        aggregator=DailyAggregator(shift_policy=TemplateShiftPolicy()),
    )

    return Container(
        punches_repo=punches_repo,
        settings_repo=settings_repo,
        import_service=import_service,
        attendance_service=attendance_service,
    )
