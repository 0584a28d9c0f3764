"""Three-level multilevel feedback queue simulation."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from .model import Process

IDLE = 0
# Time quanta of the first two levels; the last level runs a process to completion.
QUANTA = {0: 2, 1: 4}
LEVELS = 3


@dataclass
class Schedule:
    """Outcome of a simulation: finished processes and the pid run at each tick."""

    processes: list[Process]
    chart: list[int]

    def clock_time(self) -> int:
        """Number of ticks covered by the chart."""
        return len(self.chart)


def _dispatch(queues: tuple[deque, ...]) -> Optional[Process]:
    for level, queue in enumerate(queues):
        if queue:
            process = queue.popleft()
            process.level = level
            return process
    return None


def simulate(processes: Iterable[Process], sorted_arrivals: bool = False) -> Schedule:
    """Run the scheduler over copies of the given processes.

    With sorted_arrivals the input is taken to be ordered by arrival time and
    arrivals are read from it in order, stopping at the first one that does not
    arrive at the current tick.
    """
    jobs = [
        replace(p, remain_time=p.burst_time, finish_time=None, level=0)
        for p in processes
    ]
    for job in jobs:
        if job.burst_time <= 0:
            raise ValueError(f"process P{job.pid} has a non-positive burst time")

    arrivals: dict[int, list[Process]] = defaultdict(list)
    for job in jobs:
        arrivals[job.arrival_time].append(job)
    pending = deque(jobs)

    queues = tuple(deque() for _ in range(LEVELS))
    chart: list[int] = []
    running: Optional[Process] = None
    used = 0
    clock = 0

    while True:
        if sorted_arrivals:
            while pending and pending[0].arrival_time == clock:
                queues[0].append(pending.popleft())
        else:
            queues[0].extend(arrivals.get(clock, ()))

        chart.append(running.pid if running is not None else IDLE)
        if running is not None:
            running.remain_time -= 1
            used += 1
            if running.remain_time == 0:
                running.finish_time = clock + 1
                running, used = None, 0
            elif QUANTA.get(running.level) == used:
                queues[running.level + 1].append(running)
                running, used = None, 0

        if running is None:
            running = _dispatch(queues)
            if running is None:
                break
        clock += 1

    return Schedule(jobs, chart[:clock])