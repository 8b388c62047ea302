import pytest

from src.timeclock_analytics.timeclock_analytics.core.exceptions import UnsupportedFileTypeError
from src.timeclock_analytics.timeclock_analytics.parsers.factory import PunchParserFactory
from src.timeclock_analytics.timeclock_analytics.parsers.html_export import HtmlExportParser
from src.timeclock_analytics.timeclock_analytics.parsers.text_log import TextLogParser


def test_factory_picks_parser_by_extension():
    factory = PunchParserFactory()

    assert isinstance(factory.for_filename("GLG_001.TXT"), TextLogParser)
    assert isinstance(factory.for_filename("export.html"), HtmlExportParser)
    assert isinstance(factory.for_filename("export.HTM"), HtmlExportParser)


def test_factory_rejects_other_files():
    with pytest.raises(UnsupportedFileTypeError):
        PunchParserFactory().for_filename("export.xlsx")

    with pytest.raises(UnsupportedFileTypeError):
        PunchParserFactory().for_filename("README")
