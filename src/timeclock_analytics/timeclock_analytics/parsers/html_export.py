from __future__ import annotations

import logging
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Optional, Sequence

from ..common.datetime_utils import parse_dash_datetime, parse_slash_date_time
from ..core.enums import Direction, HtmlExportFormat
from ..punches.model import ParseResult, Punch
from .base import PunchParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerEventColumns:
    employee_id: int = 0
    employee_name: int = 2
    timestamp: int = 3
    state: int = 4


@dataclass(frozen=True)
class SummaryColumns:
    employee_id: int = 0
    employee_name: int = 2
    start_time: int = 3
    end_time: int = 4
    date: int = 11


PER_EVENT_COLUMNS = PerEventColumns()
SUMMARY_COLUMNS = SummaryColumns()

SUMMARY_HEADER_MARKERS = ("start time", "end time")


@dataclass
class TableRow:
    """A ``<tr>``: text of all its cells (td/th) and of its data cells (td only)."""

    depth: int
    cells: list[str] = field(default_factory=list)
    data_cells: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\t".join(self.cells)


@dataclass
class _OpenCell:
    tag: str
    parts: list[str] = field(default_factory=list)


class TableRowCollector(HTMLParser):
    """Collect every table row of a document in document order.

    Browser-like leniency: unclosed ``<td>``/``<tr>`` are closed by the next
    sibling or by the enclosing table. Text of nested markup belongs to every
    enclosing cell.
    """

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.rows: list[TableRow] = []
        self._depth = 0
        self._open_rows: list[TableRow] = []
        self._open_cells: list[tuple[TableRow, _OpenCell]] = []

    def handle_starttag(self, tag, attrs):
        if tag == "table":
            self._depth += 1
        elif tag == "tr":
            self._close_rows(self._depth)
            row = TableRow(depth=self._depth)
            self.rows.append(row)
            self._open_rows.append(row)
        elif tag in ("td", "th"):
            row = self._current_row()
            if row is None:
                return
            self._close_cell_of(row)
            self._open_cells.append((row, _OpenCell(tag)))

    def handle_endtag(self, tag):
        if tag == "table":
            self._close_rows(self._depth)
            self._depth = max(0, self._depth - 1)
        elif tag == "tr":
            self._close_rows(self._depth)
        elif tag in ("td", "th"):
            row = self._current_row()
            if row is not None:
                self._close_cell_of(row)

    def handle_data(self, data):
        for _, cell in self._open_cells:
            cell.parts.append(data)

    def close(self):
        super().close()
        while self._open_rows:
            self._close_rows(self._open_rows[-1].depth)

    def _current_row(self) -> Optional[TableRow]:
        if self._open_rows and self._open_rows[-1].depth == self._depth:
            return self._open_rows[-1]
        return None

    def _close_cell_of(self, row: TableRow) -> None:
        if not self._open_cells or self._open_cells[-1][0] is not row:
            return
        _, cell = self._open_cells.pop()
        text = "".join(cell.parts).strip()
        row.cells.append(text)
        if cell.tag == "td":
            row.data_cells.append(text)

    def _close_rows(self, depth: int) -> None:
        while self._open_rows and self._open_rows[-1].depth >= depth:
            self._close_cell_of(self._open_rows.pop())


def collect_rows(html: str) -> list[TableRow]:
    collector = TableRowCollector()
    collector.feed(html)
    collector.close()
    return collector.rows


def detect_format(header_cells: Sequence[str]) -> HtmlExportFormat:
    """Summary layout is the more specific one, so it is checked first."""
    texts = {c.strip().lower() for c in header_cells}
    if all(marker in texts for marker in SUMMARY_HEADER_MARKERS):
        return HtmlExportFormat.SUMMARY
    return HtmlExportFormat.PER_EVENT


def direction_from_state(state_text: str) -> Optional[Direction]:
    """First match wins: a state containing "in" is a clock-in."""
    lowered = state_text.lower()
    if "in" in lowered:
        return Direction.IN
    if "out" in lowered:
        return Direction.OUT
    return None


class HtmlExportParser(PunchParser):
    def parse(self, content: str) -> ParseResult:
        rows = collect_rows(content)
        if len(rows) < 2:
            logger.info("html export has %d table rows, nothing to parse", len(rows))
            return self._result([], [])

        export_format = detect_format(rows[0].cells)
        data_rows = rows[1:]
        if export_format == HtmlExportFormat.SUMMARY:
            punches, rejected = self._parse_summary_rows(data_rows)
        else:
            punches, rejected = self._parse_per_event_rows(data_rows)

        logger.info(
            "html export parsed as %s: %d punches, %d rejected rows",
            export_format.value,
            len(punches),
            len(rejected),
        )
        return self._result(punches, rejected)

    def _parse_per_event_rows(self, rows: Sequence[TableRow]) -> tuple[list[Punch], list[str]]:
        cols = PER_EVENT_COLUMNS
        punches: list[Punch] = []
        rejected: list[str] = []

        for row in rows:
            try:
                punch = None
                if len(row.data_cells) > cols.state:
                    punch = self._per_event_punch(row, cols)
            except (IndexError, ValueError) as e:
                logger.debug("per-event row failed: %r (%s)", row.text, e)
                punch = None

            if punch is None:
                logger.debug("rejected per-event row: %r", row.text)
                rejected.append(row.text)
            else:
                punches.append(punch)

        return punches, rejected

    @staticmethod
    def _per_event_punch(row: TableRow, cols: PerEventColumns) -> Optional[Punch]:
        employee_id = row.data_cells[cols.employee_id]
        employee_name = row.data_cells[cols.employee_name]
        direction = direction_from_state(row.data_cells[cols.state])
        timestamp = parse_dash_datetime(row.data_cells[cols.timestamp])

        if not employee_id or not employee_name or direction is None or timestamp is None:
            return None
        return Punch(
            employee_id=employee_id,
            employee_name=employee_name,
            timestamp=timestamp,
            direction=direction,
            source_text=row.text,
        )

    def _parse_summary_rows(self, rows: Sequence[TableRow]) -> tuple[list[Punch], list[str]]:
        cols = SUMMARY_COLUMNS
        punches: list[Punch] = []
        rejected: list[str] = []

        for row in rows:
            try:
                row_punches = self._summary_punches(row, cols) if len(row.data_cells) > cols.date else []
            except (IndexError, ValueError) as e:
                logger.debug("summary row failed: %r (%s)", row.text, e)
                row_punches = []

            if not row_punches:
                logger.debug("rejected summary row: %r", row.text)
                rejected.append(row.text)
            punches.extend(row_punches)

        return punches, rejected

    @staticmethod
    def _summary_punches(row: TableRow, cols: SummaryColumns) -> list[Punch]:
        employee_id = row.data_cells[cols.employee_id]
        employee_name = row.data_cells[cols.employee_name]
        date_text = row.data_cells[cols.date]
        if not employee_id or not employee_name or not date_text:
            return []

        out: list[Punch] = []
        for column, direction in ((cols.start_time, Direction.IN), (cols.end_time, Direction.OUT)):
            timestamp = parse_slash_date_time(date_text, row.data_cells[column])
            if timestamp is None:
                continue
            out.append(
                Punch(
                    employee_id=employee_id,
                    employee_name=employee_name,
                    timestamp=timestamp,
                    direction=direction,
                    source_text=row.text,
                )
            )
        return out


def parse_html_export(html: str) -> list[Punch]:
    return HtmlExportParser().parse(html).punches
