from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.constants import DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES


@dataclass(frozen=True)
class Settings:
    """Analysis settings. Read-only for the parsing and aggregation code."""

    deduct_lunch_break: bool = False
    lunch_break_threshold_minutes: int = DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES
    holidays: frozenset[date] = field(default_factory=frozenset)
