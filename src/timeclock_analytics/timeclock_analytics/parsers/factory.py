from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from ..core.constants import DEFAULT_REJECTION_SAMPLE_SIZE
from ..core.exceptions import UnsupportedFileTypeError
from .base import PunchParser
from .html_export import HtmlExportParser
from .text_log import TextLogParser

TEXT_EXTENSIONS = frozenset({".txt"})
HTML_EXTENSIONS = frozenset({".html", ".htm"})


@dataclass
class PunchParserFactory:
    """Factory Pattern: choose the parser from the uploaded file name."""

    sample_size: int = DEFAULT_REJECTION_SAMPLE_SIZE

    def for_filename(self, filename: str) -> PunchParser:
        suffix = PurePath(filename or "").suffix.lower()
        if suffix in TEXT_EXTENSIONS:
            return TextLogParser(sample_size=self.sample_size)
        if suffix in HTML_EXTENSIONS:
            return HtmlExportParser(sample_size=self.sample_size)
        raise UnsupportedFileTypeError(f"Unsupported file type '{suffix or filename}': use a .txt or .html export")
