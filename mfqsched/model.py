"""Process records and reading of process description files."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import MutableSequence, Optional, Union

MAX_LENGTH = 1000

_HEADER = re.compile(r"Number\s*of\s*Processes:\s*([+-]?\d+)\s*")
_ROW = re.compile(r"\s*([+-]?\d+),\s*([+-]?\d+),\s*([+-]?\d+)\s*")


class InputFormatError(ValueError):
    """Raised when a process description cannot be parsed."""


@dataclass
class Process:
    """A process to be scheduled, with its run-time state."""

    pid: int
    arrival_time: int
    burst_time: int
    remain_time: Optional[int] = None
    finish_time: Optional[int] = None
    level: int = 0

    def __post_init__(self) -> None:
        if self.remain_time is None:
            self.remain_time = self.burst_time

    def turnaround_time(self) -> int:
        """Time from arrival until completion."""
        if self.finish_time is None:
            raise ValueError(f"process P{self.pid} has not finished")
        return self.finish_time - self.arrival_time

    def waiting_time(self) -> int:
        """Time spent in the system without running."""
        return self.turnaround_time() - self.burst_time


def parse_processes(text: str) -> list[Process]:
    """Parse a process description: a count header, then one "pid, arrival, burst" per process."""
    header = _HEADER.match(text)
    if header is None:
        raise InputFormatError("Invalid input format.")
    count = int(header.group(1))
    if count > MAX_LENGTH:
        raise InputFormatError(f"Too many processes. Max is {MAX_LENGTH}")

    processes = []
    position = header.end()
    for line_number in range(2, count + 2):
        row = _ROW.match(text, position)
        if row is None:
            raise InputFormatError(f"Invalid process data on line {line_number}")
        pid, arrival, burst = map(int, row.groups())
        processes.append(Process(pid, arrival, burst))
        position = row.end()
    return processes


def read_processes(path: Union[str, Path]) -> list[Process]:
    """Read and parse a process description file."""
    with open(path, encoding="utf-8") as handle:
        return parse_processes(handle.read())


def shortest_next(queue: MutableSequence[Process] | deque) -> Optional[Process]:
    """Remove and return the queued process with the least remaining time, or None."""
    if not queue:
        return None
    index, shortest = min(enumerate(queue), key=lambda item: item[1].remain_time)
    del queue[index]
    return shortest