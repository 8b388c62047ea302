from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.constants import DEFAULT_REJECTION_SAMPLE_SIZE
from ..punches.model import ParseResult, Punch


class PunchParser(ABC):
    """Turns the text of one export file into punches."""

    def __init__(self, *, sample_size: int = DEFAULT_REJECTION_SAMPLE_SIZE):
        self._sample_size = int(sample_size)

    @abstractmethod
    def parse(self, content: str) -> ParseResult:
        raise NotImplementedError

    def _result(self, punches: list[Punch], rejected: list[str]) -> ParseResult:
        return ParseResult(
            punches=punches,
            rejected_count=len(rejected),
            rejected_samples=rejected[: self._sample_size],
        )
