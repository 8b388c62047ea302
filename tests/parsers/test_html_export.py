from datetime import date, datetime

from src.timeclock_analytics.timeclock_analytics.core.enums import Direction, HtmlExportFormat
from src.timeclock_analytics.timeclock_analytics.parsers.html_export import (
    HtmlExportParser,
    collect_rows,
    detect_format,
    direction_from_state,
    parse_html_export,
)


def _summary_row(emp_id, name, start, end, day):
    cells = [emp_id, "", name, start, end] + ["x"] * 6 + [day]
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


SUMMARY_HEADER = (
    "<tr><th>AC-No</th><th>No</th><th>Name</th><th>Start Time</th><th>End Time</th>"
    + "<th>c</th>" * 6
    + "<th>Date</th></tr>"
)

PER_EVENT_HEADER = "<tr><td>AC-No</td><td>No</td><td>Name</td><td>Time</td><td>State</td></tr>"


def test_summary_row_yields_in_and_out():
    html = f"<html><body><table>{SUMMARY_HEADER}{_summary_row('42', 'John Doe', '09:00', '18:00', '01/09/2023')}</table></body></html>"

    punches = parse_html_export(html)

    assert len(punches) == 2
    assert [p.direction for p in punches] == [Direction.IN, Direction.OUT]
    assert all(p.timestamp.date() == date(2023, 9, 1) for p in punches)
    assert punches[0].timestamp == datetime(2023, 9, 1, 9, 0)
    assert punches[1].timestamp == datetime(2023, 9, 1, 18, 0)
    assert punches[0].employee_id == "42"
    assert punches[0].employee_name == "John Doe"


def test_summary_row_with_one_time_yields_one_punch():
    rows = _summary_row("1", "A", "08:55", "", "02/09/2023") + _summary_row("2", "B", "", "", "02/09/2023")
    result = HtmlExportParser().parse(f"<table>{SUMMARY_HEADER}{rows}</table>")

    assert len(result.punches) == 1
    assert result.punches[0].direction == Direction.IN
    assert result.rejected_count == 1


def test_summary_row_needs_slash_date():
    rows = _summary_row("1", "A", "09:00", "18:00", "02-09-2023")
    assert parse_html_export(f"<table>{SUMMARY_HEADER}{rows}</table>") == []


def test_per_event_rows():
    rows = (
        "<tr><td>7</td><td>1</td><td>Ann Lee</td><td>01-09-2023 08:58</td><td>C/In</td></tr>"
        "<tr><td>7</td><td>1</td><td>Ann Lee</td><td>01-09-2023 17:02</td><td>Check OUT</td></tr>"
    )
    punches = parse_html_export(f"<table>{PER_EVENT_HEADER}{rows}</table>")

    assert [(p.timestamp, p.direction) for p in punches] == [
        (datetime(2023, 9, 1, 8, 58), Direction.IN),
        (datetime(2023, 9, 1, 17, 2), Direction.OUT),
    ]
    assert punches[0].source_text == "7\t1\tAnn Lee\t01-09-2023 08:58\tC/In"


def test_per_event_bad_rows_are_skipped_individually():
    rows = (
        "<tr><td>7</td><td>1</td><td>Ann</td><td>not a date</td><td>C/In</td></tr>"
        "<tr><td>7</td><td>1</td><td>Ann</td><td>01-09-2023 12:00</td><td>Break</td></tr>"
        "<tr><td>7</td><td>1</td><td>Ann</td><td>01-09-2023 12:30</td></tr>"
        "<tr><td></td><td>1</td><td>Ann</td><td>01-09-2023 12:45</td><td>C/In</td></tr>"
        "<tr><td>7</td><td>1</td><td>Ann</td><td>01-09-2023 13:00</td><td>C/Out</td></tr>"
    )
    result = HtmlExportParser().parse(f"<table>{PER_EVENT_HEADER}{rows}</table>")

    assert len(result.punches) == 1
    assert result.punches[0].timestamp == datetime(2023, 9, 1, 13, 0)
    assert result.rejected_count == 4


def test_fewer_than_two_rows_is_empty():
    assert parse_html_export("<p>nothing here</p>") == []
    assert parse_html_export(f"<table>{PER_EVENT_HEADER}</table>") == []


def test_rows_are_collected_across_tables():
    html = (
        f"<table>{PER_EVENT_HEADER}</table>"
        "<table><tr><td>3</td><td>-</td><td>Bo</td><td>05-09-2023 09:30</td><td>in</td></tr></table>"
    )
    punches = parse_html_export(html)

    assert len(punches) == 1
    assert punches[0].employee_name == "Bo"


def test_unclosed_cells_and_rows_are_tolerated():
    html = (
        "<table><tr><td>AC-No<td>No<td>Name<td>Time<td>State"
        "<tr><td>9<td>1<td>Cy &amp; Co<td>06-09-2023 07:45<td>C/In"
        "</table>"
    )
    rows = collect_rows(html)

    assert len(rows) == 2
    assert rows[1].data_cells == ["9", "1", "Cy & Co", "06-09-2023 07:45", "C/In"]
    assert parse_html_export(html)[0].employee_name == "Cy & Co"


def test_detect_format_prefers_summary():
    assert detect_format(["Name", " START TIME ", "End Time", "Time", "State"]) == HtmlExportFormat.SUMMARY
    assert detect_format(["Name", "Start Time", "Time", "State"]) == HtmlExportFormat.PER_EVENT


def test_direction_from_state_first_match_wins():
    assert direction_from_state("Check In") == Direction.IN
    assert direction_from_state("OUT") == Direction.OUT
    # "in" is looked for first, even inside another word
    assert direction_from_state("Login OUT") == Direction.IN
    assert direction_from_state("Break") is None


def test_line_break_inside_cell_adds_no_text():
    html = (
        f"<table>{PER_EVENT_HEADER}"
        "<tr><td>5</td><td>1</td><td>Jo<br>Ann</td><td>06-09-2023 08:00</td><td>C/In</td></tr>"
        "</table>"
    )

    assert parse_html_export(html)[0].employee_name == "JoAnn"
