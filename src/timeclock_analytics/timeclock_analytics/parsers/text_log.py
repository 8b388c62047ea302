from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import parse_dash_datetime
from ..core.enums import Direction
from ..punches.model import ParseResult, Punch
from .base import PunchParser

logger = logging.getLogger(__name__)

DIRECTION_LITERALS = {
    "C/In": Direction.IN,
    "C/Out": Direction.OUT,
}

MIN_TOKENS = 4


class TextLogParser(PunchParser):
    """Whitespace-tokenized logs: ``<id> <name...> DD-MM-YYYY HH:MM C/In|C/Out``.

    Lines that do not fit are dropped; they only show up in the rejection
    count of the result.
    """

    def parse(self, content: str) -> ParseResult:
        punches: list[Punch] = []
        rejected: list[str] = []

        for line in content.splitlines():
            if not line.strip():
                continue
            punch = self.parse_line(line)
            if punch is None:
                logger.debug("rejected text log line: %r", line)
                rejected.append(line)
            else:
                punches.append(punch)

        logger.info("text log parsed: %d punches, %d rejected lines", len(punches), len(rejected))
        return self._result(punches, rejected)

    @staticmethod
    def parse_line(line: str) -> Optional[Punch]:
        tokens = line.split()
        if len(tokens) < MIN_TOKENS:
            return None

        direction = DIRECTION_LITERALS.get(tokens[-1])
        if direction is None:
            return None

        employee_id = tokens[0]
        name = " ".join(tokens[1:-3])
        timestamp = parse_dash_datetime(f"{tokens[-3]} {tokens[-2]}")
        if not name or timestamp is None:
            return None

        return Punch(
            employee_id=employee_id,
            employee_name=name,
            timestamp=timestamp,
            direction=direction,
            source_text=line,
        )


def parse_text_log(text: str) -> list[Punch]:
    return TextLogParser().parse(text).punches
