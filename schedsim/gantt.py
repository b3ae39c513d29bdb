from __future__ import annotations

from typing import Dict, List, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

PID_COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]
IDLE = "."


def _ordered(slices: List[ScheduledSlice]) -> List[ScheduledSlice]:
    return sorted(slices, key=lambda s: (s.start_time, s.end_time))


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart: one character per time unit, idle units as dots,
    followed by the pid labels and the slice boundaries.
    """
    if not slices:
        return "(no execution)"

    bar = ""
    labels = ""
    marks = ["0"]
    clock = 0

    for sl in _ordered(slices):
        if sl.start_time > clock:
            gap = sl.start_time - clock
            bar += IDLE * gap
            labels += " " * gap
            marks.append(str(sl.start_time))

        bar += "#" * sl.duration
        labels += sl.pid[: sl.duration].ljust(sl.duration)
        marks.append(str(sl.end_time))
        clock = sl.end_time

    return "\n".join(["Gantt Chart:", f"|{bar}|", f" {labels}", " ".join(marks)])


def build_rich_gantt(slices: List[ScheduledSlice]) -> Tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with the
    slice boundaries.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            pid_to_color[pid] = PID_COLORS[len(pid_to_color) % len(PID_COLORS)]
        return pid_to_color[pid]

    bar = Text()
    labels = Text()
    marks = "0"
    clock = 0

    for sl in _ordered(slices):
        if sl.start_time > clock:
            gap = sl.start_time - clock
            bar.append(IDLE * gap, style="dim")
            labels.append(" " * gap)
            marks += f" {sl.start_time}"

        bar.append(" " * sl.duration, style=f"on {pid_color(sl.pid)}")
        labels.append(sl.pid[: sl.duration].ljust(sl.duration), style="bold")
        marks += f" {sl.end_time}"
        clock = sl.end_time

    grid = Table.grid(padding=(0, 0))
    grid.add_row(bar)
    grid.add_row(labels)

    return Panel.fit(grid, title="Gantt Chart"), marks
