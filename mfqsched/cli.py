"""Command line entry point: simulate the scheduler over a process file."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .model import InputFormatError, read_processes
from .report import render_report
from .scheduler import simulate


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read processes, run the scheduler and print the report."""
    parser = argparse.ArgumentParser(
        prog="mfqsched", description="Multilevel feedback queue scheduling simulator."
    )
    parser.add_argument("input", nargs="?", default="input.txt", help="process description file")
    parser.add_argument(
        "--sorted-arrivals",
        action="store_true",
        help="read arrivals in input order, assuming the file is sorted by arrival time",
    )
    args = parser.parse_args(argv)

    try:
        processes = read_processes(args.input)
    except OSError:
        sys.stdout.write("Error: Cannot open file")
        return 1
    except InputFormatError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    try:
        report = render_report(simulate(processes, args.sorted_arrivals))
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())