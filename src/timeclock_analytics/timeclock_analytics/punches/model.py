from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from ..core.enums import Direction


def new_punch_id() -> str:
    """Opaque identifier; only uniqueness matters."""
    return f"punch-{uuid.uuid4().hex}"


@dataclass(frozen=True)
class Punch:
    """Domain entity: one timestamped clock-in/clock-out action."""

    employee_id: str
    employee_name: str
    timestamp: datetime
    direction: Direction
    source_text: str
    manual: bool = False
    punch_id: str = field(default_factory=new_punch_id)

    @property
    def dedup_key(self) -> tuple[str, datetime]:
        return (self.employee_id, self.timestamp)


@dataclass(frozen=True)
class ParseResult:
    """Parser output: accepted punches plus what was dropped on the way."""

    punches: list[Punch]
    rejected_count: int = 0
    rejected_samples: list[str] = field(default_factory=list)
