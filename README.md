# mfqsched

A small simulator for multilevel feedback queue (MFQ) CPU scheduling.

There are three queues. New arrivals enter Q0. When a process uses up
its time quantum, it drops one level:

| Queue | Time quantum | On expiry    |
|-------|--------------|--------------|
| Q0    | 2            | moves to Q1  |
| Q1    | 4            | moves to Q2  |
| Q2    | none (FCFS)  | runs to end  |

The scheduler always picks the next process from the highest queue that
is not empty. A running process keeps the CPU until it finishes or its
quantum runs out. A new arrival does not preempt it.

After the run, a report is printed. It holds a Gantt chart, then each
process's turnaround time (TT) and waiting time (WT), then the averages.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Input format

```
Number of Processes: 3
1, 0, 5
2, 1, 3
3, 2, 8
```

The first line gives the number of processes. Each line after it is
`pid, arrival_time, burst_time`. The count may be at most 1000. The
parser reads exactly as many lines as the count says.

## Command line

```
mfqsched
```

This reads `input.txt` from the current directory. To use a different
file, give its path:

```
mfqsched path/to/processes.txt
```

Arrivals are normally taken from the whole file at every tick. If the
file is already sorted by arrival time, you can pass `--sorted-arrivals`.
Arrivals are then read in file order, and reading stops at the first
process that does not arrive at the current tick:

```
mfqsched --sorted-arrivals path/to/processes.txt
```

The command exits with status 1 in these cases:

- If the file cannot be opened, it prints `Error: Cannot open file` to
  standard output.
- If the file is badly formed, or a process has a burst time of zero or
  less, it prints the reason to standard error.

## Library use

```python
from mfqsched.model import parse_processes
from mfqsched.scheduler import simulate
from mfqsched.report import render_report

processes = parse_processes(
    "Number of Processes: 2\n"
    "1, 0, 3\n"
    "2, 1, 2\n"
)
schedule = simulate(processes)
print(render_report(schedule))
```

### `mfqsched.model`

- `Process` is a dataclass with these fields: `pid`, `arrival_time`,
  `burst_time`, `remain_time`, `finish_time` and `level`.
  - `remain_time` defaults to the burst time.
  - `turnaround_time()` and `waiting_time()` return the statistics.
    They raise `ValueError` if the process has not finished.
- `parse_processes(text)` parses a process description.
  `read_processes(path)` reads one from a file.
  - Both raise `InputFormatError`, a subclass of `ValueError`, when the
    input is malformed.
- `shortest_next(queue)` removes the queued process with the least
  remaining time and returns it. It returns `None` if the queue is empty.

### `mfqsched.scheduler`

- `simulate(processes, sorted_arrivals=False)` runs the scheduler on
  copies of the given processes. The inputs are left unchanged.
  - It raises `ValueError` if any burst time is zero or less.
  - It returns a `Schedule`.
- A `Schedule` has these parts:
  - `processes`: the finished copies.
  - `chart`: the pid run at each tick. A tick with no running process
    is recorded as 0.
  - `clock_time()`: the number of ticks.

### `mfqsched.report`

- `format_gantt(chart)` renders the Gantt chart.
- `format_statistics(processes)` renders the TT/WT table and the
  averages.
- `render_report(schedule)` joins the two into one report.

## Limitations

The time quanta (2 and 4) and the number of queues (three) are fixed.
They cannot be set from the command line or through `simulate`. The
report is plain text only.