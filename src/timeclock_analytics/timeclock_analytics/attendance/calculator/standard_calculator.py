from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ...core.constants import DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES
from ...core.enums import Direction
from ...punches.model import Punch
from ...settings.model import Settings
from .base import WorkedTimeCalculator


def _minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() / 60)


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: (last out - first in), minus long OUT -> IN gaps when enabled."""

    def worked_minutes(
        self,
        punches: Sequence[Punch],
        *,
        first_in: Optional[datetime],
        last_out: Optional[datetime],
        settings: Optional[Settings],
    ) -> int:
        if first_in is None or last_out is None:
            return 0

        minutes = _minutes_between(first_in, last_out)
        if settings is not None and settings.deduct_lunch_break:
            minutes -= self.break_minutes(punches, settings)
        return minutes

    @staticmethod
    def break_minutes(punches: Sequence[Punch], settings: Settings) -> int:
        """Total length of OUT -> IN gaps longer than the lunch threshold.

        ``punches`` must be sorted by timestamp.
        """
        threshold = settings.lunch_break_threshold_minutes
        if threshold is None:
            threshold = DEFAULT_LUNCH_BREAK_THRESHOLD_MINUTES

        total = 0
        for current, following in zip(punches, punches[1:]):
            if current.direction == Direction.OUT and following.direction == Direction.IN:
                gap = _minutes_between(current.timestamp, following.timestamp)
                if gap > threshold:
                    total += gap
        return total
