from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..core.exceptions import NoValidPunchesError, UnsupportedFileTypeError
from ..parsers.factory import PunchParserFactory
from ..punches.model import Punch
from ..punches.repository import PunchRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportOutcome:
    filename: str
    added: int
    duplicates: int
    rejected: int
    rejected_samples: list[str] = field(default_factory=list)


def decode_upload(content: bytes | str) -> str:
    """Exports are usually UTF-8; older clocks write Latin-1."""
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return content.decode("latin-1")


def dedupe_batch(punches: list[Punch]) -> list[Punch]:
    """Keep the first punch for each (employee_id, timestamp)."""
    unique: dict[tuple, Punch] = {}
    for p in punches:
        unique.setdefault(p.dedup_key, p)
    return list(unique.values())


class ImportService:
    def __init__(self, punches: PunchRepository, *, parser_factory: PunchParserFactory | None = None):
        self._punches = punches
        self._factory = parser_factory or PunchParserFactory()

    def import_file(self, filename: str, content: bytes | str) -> ImportOutcome:
        try:
            parser = self._factory.for_filename(filename)
        except UnsupportedFileTypeError:
            logger.warning("refused upload %r: unsupported file type", filename)
            raise

        result = parser.parse(decode_upload(content))
        if not result.punches:
            logger.warning("refused upload %r: no valid punch (%d rejected)", filename, result.rejected_count)
            raise NoValidPunchesError("No valid punch record was found in the file")

        batch = dedupe_batch(result.punches)
        fresh = [p for p in batch if not self._punches.exists(p.employee_id, p.timestamp)]
        added = self._punches.add_many(fresh) if fresh else 0

        outcome = ImportOutcome(
            filename=filename,
            added=added,
            duplicates=len(result.punches) - added,
            rejected=result.rejected_count,
            rejected_samples=list(result.rejected_samples),
        )
        logger.info(
            "imported %r: %d added, %d duplicates, %d rejected",
            filename,
            outcome.added,
            outcome.duplicates,
            outcome.rejected,
        )
        return outcome

    def clear_all(self) -> int:
        """Drop every stored punch; returns how many were removed."""
        removed = len(self._punches.list_all())
        self._punches.clear()
        logger.info("cleared %d stored punches", removed)
        return removed
