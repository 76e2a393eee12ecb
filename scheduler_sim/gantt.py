from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from rich.panel import Panel
from rich.text import Text

from .models import ScheduledSlice

CELL_WIDTH = 8
IDLE_LABEL = "idle"
COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def _cells(slices: List[ScheduledSlice]) -> Tuple[List[Tuple[Optional[int], int]], int]:
    """
    Turn slices into ``(pid, start)`` cells in start order, with a ``None``
    pid cell for every stretch where the CPU sat idle. Also returns the end
    time of the last slice.
    """
    cells: List[Tuple[Optional[int], int]] = []
    last_time = 0
    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        if sl.start_time > last_time:
            cells.append((None, last_time))
        cells.append((sl.pid, sl.start_time))
        last_time = sl.end_time
    return cells, last_time


def _time_marks(cells: List[Tuple[Optional[int], int]], end_time: int) -> str:
    return "".join(str(start).ljust(CELL_WIDTH + 1) for _, start in cells) + str(end_time)


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart: one fixed-width cell per slice with the slice
    start times underneath and the final stop time at the end.
    """
    if not slices:
        return "(no execution)"

    cells, end_time = _cells(slices)
    row = "|" + "".join(
        (IDLE_LABEL if pid is None else str(pid)).center(CELL_WIDTH) + "|" for pid, _ in cells
    )
    return "\n".join(["Gantt schedule", row, _time_marks(cells, end_time)])


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel with the same cell layout as ``render_gantt``, each
    process in its own color, plus the time marks line to print under it.
    """
    if not slices:
        return Panel("No execution", title="Gantt schedule"), ""

    cells, end_time = _cells(slices)
    pid_to_color: Dict[int, str] = {}

    row = Text("|")
    for pid, _ in cells:
        if pid is None:
            row.append(IDLE_LABEL.center(CELL_WIDTH), style="dim")
        else:
            color = pid_to_color.setdefault(pid, COLORS[len(pid_to_color) % len(COLORS)])
            row.append(str(pid).center(CELL_WIDTH), style=f"bold on {color}")
        row.append("|")

    return Panel.fit(row, title="Gantt schedule"), _time_marks(cells, end_time)
