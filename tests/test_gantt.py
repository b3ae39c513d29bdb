from rich.panel import Panel

from schedsim.algorithms import schedule_priority
from schedsim.gantt import build_rich_gantt, render_gantt
from schedsim.models import Process


def _slices():
    procs = [
        Process("P1", arrival_time=0, burst_time=10, priority=3),
        Process("P2", arrival_time=1, burst_time=5, priority=1),
        Process("P3", arrival_time=2, burst_time=8, priority=2),
    ]
    return schedule_priority(procs).timeline


def test_render_gantt_marks_idle_time():
    lines = render_gantt(_slices()).splitlines()
    assert lines[0] == "Gantt Chart:"
    assert lines[1] == "|." + "#" * 23 + "|"
    assert lines[2].split() == ["P2", "P3", "P1"]
    assert lines[3] == "0 1 6 14 24"


def test_render_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_rich_gantt_time_marks():
    panel, marks = build_rich_gantt(_slices())
    assert isinstance(panel, Panel)
    assert marks == "0 1 6 14 24"


def test_rich_gantt_empty():
    panel, marks = build_rich_gantt([])
    assert isinstance(panel, Panel)
    assert marks == ""
