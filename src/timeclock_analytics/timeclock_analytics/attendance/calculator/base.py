from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

from ...punches.model import Punch
from ...settings.model import Settings


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(
        self,
        punches: Sequence[Punch],
        *,
        first_in: Optional[datetime],
        last_out: Optional[datetime],
        settings: Optional[Settings],
    ) -> int:
        raise NotImplementedError
