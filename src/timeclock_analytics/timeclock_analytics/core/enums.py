from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Punch direction as written by the time clock."""

    IN = "IN"
    OUT = "OUT"


class Anomaly(str, Enum):
    """Irregularity of a day's punch count."""

    NONE = "NONE"
    SINGLE_EVENT = "SINGLE_EVENT"
    MULTIPLE_EVENTS = "MULTIPLE_EVENTS"


class HtmlExportFormat(str, Enum):
    """Table layouts produced by the HTML export of the time clock."""

    PER_EVENT = "PER_EVENT"
    SUMMARY = "SUMMARY"
