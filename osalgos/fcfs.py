"""First-come, first-served CPU scheduling."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Iterator, Sequence, TextIO

from osalgos.model import (
    Completion,
    Job,
    average_turnaround,
    average_waiting,
    make_jobs,
    read_ints,
)

_HEADER = (
    "Process ID | Arrival Time | Burst Time | Completion Time"
    " | Turnaround Time | Waiting Time"
)
_RULE = "-" * 88


def schedule(jobs: Iterable[Job]) -> list[Completion]:
    """Run jobs in the order given, idling until each one arrives."""
    clock = 0
    completions = []
    for job in jobs:
        clock = max(clock, job.arrival) + job.burst
        completions.append(Completion(job, clock))
    return completions


def format_table(completions: Iterable[Completion]) -> str:
    """Render completions as an aligned table followed by averages."""
    completions = list(completions)
    lines = ["", _HEADER, _RULE]
    for done in completions:
        job = done.job
        lines.append(
            f"{job.pid:>10} | {job.arrival:>12} | {job.burst:>10} | "
            f"{done.completion:>15} | {done.turnaround:>15} | {done.waiting:>12}"
        )
    lines += [
        "",
        f"Average Waiting Time: {average_waiting(completions):g}",
        f"Average Turnaround Time: {average_turnaround(completions):g}",
    ]
    return "\n".join(lines) + "\n"


def _space_table(
    header: str,
    completions: Iterable[Completion],
    row: Callable[[Completion], Sequence[int]],
) -> str:
    """Render one space-separated row per completion, then the averages."""
    completions = list(completions)
    lines = [header]
    lines.extend(" ".join(str(value) for value in row(done)) for done in completions)
    lines += [
        f"Average waiting time is : {average_waiting(completions):g}",
        f"Average turn around time is : {average_turnaround(completions):g}",
    ]
    return "\n".join(lines) + "\n"


def format_compact_table(completions: Iterable[Completion]) -> str:
    """Render completions as space-separated columns followed by averages."""
    return _space_table(
        "P BT AT CT WT TAT",
        completions,
        lambda done: (
            done.job.pid,
            done.job.burst,
            done.job.arrival,
            done.completion,
            done.waiting,
            done.turnaround,
        ),
    )


def _tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        yield from read_ints(line)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _read_count(tokens: Iterator[int], noun: str = "number of processes") -> int:
    count = next(tokens)
    if count < 0:
        raise ValueError(f"the {noun} cannot be negative")
    return count


def _read_columns(
    tokens: Iterator[int], kinds: Sequence[str], which: str = "the processes"
) -> list[list[int]]:
    """Ask for a count, then for one full column of values per kind."""
    _prompt("Enter the number of processes : ")
    count = _read_count(tokens)
    columns = []
    for kind in kinds:
        print(f"Enter the {kind} of {which} : ")
        columns.append([next(tokens) for _ in range(count)])
    return columns


def _run_cli(
    parser: argparse.ArgumentParser,
    argv,
    work: Callable[[argparse.Namespace, Iterator[int]], str],
    error_prefix: str = "",
) -> int:
    """Parse arguments, run work on standard input and print what it returns."""
    args = parser.parse_args(argv)
    try:
        output = work(args, _tokens(sys.stdin))
    except StopIteration:
        message = "unexpected end of input"
    except ValueError as exc:
        message = str(exc)
    else:
        print(output, end="")
        return 0
    print(f"{error_prefix}error: {message}", file=sys.stderr)
    return 1


def _read_interleaved(tokens: Iterator[int]) -> list[Job]:
    _prompt("Enter number of processes: ")
    count = _read_count(tokens)
    print("Enter arrival time and burst time for each process:")
    arrivals, bursts = [], []
    for pid in range(1, count + 1):
        _prompt(f"Process {pid} arrival time: ")
        arrivals.append(next(tokens))
        _prompt(f"Process {pid} burst time: ")
        bursts.append(next(tokens))
    return make_jobs(arrivals, bursts)


def _work(args: argparse.Namespace, tokens: Iterator[int]) -> str:
    if args.compact:
        jobs = make_jobs(*_read_columns(tokens, ("arrival time", "burst time")))
        return format_compact_table(schedule(jobs))
    return format_table(schedule(_read_interleaved(tokens)))


def main(argv=None) -> int:
    """Read processes from standard input and print the FCFS schedule."""
    parser = argparse.ArgumentParser(
        prog="fcfs", description="First-come, first-served scheduling."
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="read all arrival times, then all burst times; print a compact table",
    )
    return _run_cli(parser, argv, _work)