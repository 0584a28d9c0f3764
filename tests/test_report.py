import pytest

from mfqsched.model import Process
from mfqsched.report import format_gantt, format_statistics, render_report
from mfqsched.scheduler import simulate


def test_gantt_worked_example():
    assert format_gantt([0, 1, 1]) == "Gantt Chart\n|P0 |P1 |\n0   1   3\n"


def test_gantt_empty():
    assert format_gantt([]) == "Gantt Chart\n|\n0\n"


def test_gantt_segments_follow_changes():
    chart = [0, 1, 1, 2, 2, 1]
    lines = format_gantt(chart).splitlines()
    assert lines[0] == "Gantt Chart"
    assert lines[1].count("|P") == 4
    assert lines[2].split() == ["0", "1", "3", "5", "6"]


def test_statistics_rows_and_header():
    process = Process(1, 0, 3, finish_time=4)
    text = format_statistics([process])
    assert text.startswith("\nPID   TT     WT\n==================\n")
    assert "P1     4      1\n" in text
    assert text.endswith("Average WT: 1.0")
    assert "Avergae TT: 4.0" in text


def test_statistics_averages_one_decimal():
    processes = [Process(1, 0, 1, finish_time=2), Process(2, 0, 1, finish_time=3)]
    text = format_statistics(processes)
    assert "Avergae TT: 2.5\n" in text


def test_statistics_empty_gives_nan():
    assert format_statistics([]).endswith("Average WT: nan")


def test_statistics_unfinished_raises():
    with pytest.raises(ValueError):
        format_statistics([Process(1, 0, 2)])


def test_render_report_joins_parts():
    schedule = simulate([Process(1, 0, 5), Process(2, 0, 2)])
    text = render_report(schedule)
    assert text == format_gantt(schedule.chart) + format_statistics(schedule.processes)
    assert text.startswith("Gantt Chart\n")