"""Text rendering of a schedule: Gantt chart and per-process statistics."""

from __future__ import annotations

import math
from typing import Sequence

from .model import Process
from .scheduler import Schedule


def format_gantt(chart: Sequence[int]) -> str:
    """Render the Gantt chart with a row of pids and a row of start ticks."""
    starts = [
        (tick, pid)
        for tick, (prev, pid) in enumerate(zip([-1, *chart], chart))
        if pid != prev
    ]
    bars = "".join(f"|P{pid:<2}" for _, pid in starts)
    ticks = "".join(f"{tick:<4}" for tick, _ in starts)
    return f"Gantt Chart\n{bars}|\n{ticks}{len(chart)}\n"


def format_statistics(processes: Sequence[Process]) -> str:
    """Render turnaround and waiting times with their averages."""
    rows = []
    total_tt = total_wt = 0
    for process in processes:
        turnaround = process.turnaround_time()
        waiting = process.waiting_time()
        total_tt += turnaround
        total_wt += waiting
        rows.append(f"P{process.pid} {turnaround:5d} {waiting:6d}\n")
    count = len(processes)
    avg_tt = total_tt / count if count else math.nan
    avg_wt = total_wt / count if count else math.nan
    return (
        "\nPID   TT     WT\n"
        "==================\n"
        + "".join(rows)
        + f"\nAvergae TT: {avg_tt:.1f}\n"
        + f"Average WT: {avg_wt:.1f}"
    )


def render_report(schedule: Schedule) -> str:
    """Full report for a schedule."""
    return format_gantt(schedule.chart) + format_statistics(schedule.processes)