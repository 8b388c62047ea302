from __future__ import annotations

from datetime import datetime
from typing import Iterable, Protocol, Sequence

from .model import Punch


class PunchRepository(Protocol):
    def list_all(self) -> Sequence[Punch]:
        raise NotImplementedError

    def exists(self, employee_id: str, timestamp: datetime) -> bool:
        raise NotImplementedError

    def add_many(self, punches: Iterable[Punch]) -> int:
        """Store punches, ignoring any whose (employee, timestamp) is already stored."""

        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
