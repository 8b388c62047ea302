from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import time
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: a named time-of-day window (no cross-midnight)."""

    name: str
    start_time: Optional[time]
    end_time: Optional[time]

    @property
    def is_complete(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    def renamed(self, name: str) -> "Shift":
        return replace(self, name=name)


MORNING = Shift(name="Morning", start_time=time(9, 0), end_time=time(18, 0))
AFTERNOON = Shift(name="Afternoon", start_time=time(14, 0), end_time=time(21, 0))
