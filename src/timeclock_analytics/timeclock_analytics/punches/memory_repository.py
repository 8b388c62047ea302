from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from .model import Punch
from .repository import PunchRepository


class InMemoryPunchRepository(PunchRepository):
    """Punch store keyed by the (employee_id, timestamp) unique index."""

    def __init__(self, punches: Iterable[Punch] = ()):
        self._by_key: dict[tuple[str, datetime], Punch] = {}
        self.add_many(punches)

    def list_all(self) -> Sequence[Punch]:
        return sorted(self._by_key.values(), key=lambda p: (p.timestamp, p.employee_id))

    def exists(self, employee_id: str, timestamp: datetime) -> bool:
        return (employee_id, timestamp) in self._by_key

    def add_many(self, punches: Iterable[Punch]) -> int:
        added = 0
        for p in punches:
            if p.dedup_key in self._by_key:
                continue
            self._by_key[p.dedup_key] = p
            added += 1
        return added

    def clear(self) -> None:
        self._by_key.clear()
