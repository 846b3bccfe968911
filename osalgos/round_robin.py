"""Round-robin CPU scheduling with a fixed time quantum."""

from __future__ import annotations

import argparse
from typing import Iterable, Iterator

from osalgos.fcfs import _prompt, _read_count, _run_cli
from osalgos.model import (
    Completion,
    Job,
    average_turnaround,
    average_waiting,
    make_jobs,
)
from osalgos.sjf import _by_arrival, _completions


def schedule(jobs: Iterable[Job], quantum: int) -> list[Completion]:
    """Sweep the jobs in arrival order, giving each arrived one a quantum.

    A sweep that finds nothing to run advances the clock by one unit.
    Completions come back ordered by arrival time.
    """
    if quantum <= 0:
        raise ValueError("the time quantum must be positive")
    ordered = _by_arrival(jobs)
    if any(job.burst < 0 for job in ordered):
        raise ValueError("burst times cannot be negative")
    remaining = [job.burst for job in ordered]
    finished: dict[int, int] = {}
    clock = 0
    while len(finished) < len(ordered):
        executed = False
        for index, job in enumerate(ordered):
            if index in finished or job.arrival > clock:
                continue
            executed = True
            run = min(quantum, remaining[index])
            remaining[index] -= run
            clock += run
            if remaining[index] == 0:
                finished[index] = clock
        if not executed:
            clock += 1
    return _completions(ordered, finished)


def format_table(completions: Iterable[Completion]) -> str:
    """Render completions as tab-separated columns followed by averages."""
    completions = list(completions)
    lines = ["", "PID\tArrival\tBurst\tCompletion\tTurnaround\tWaiting"]
    lines.extend(
        f"{done.job.pid}\t{done.job.arrival}\t{done.job.burst}\t"
        f"{done.completion}\t\t{done.turnaround}\t\t{done.waiting}"
        for done in completions
    )
    lines += [
        "",
        f"Average Turnaround Time: {average_turnaround(completions):.2f}",
        f"Average Waiting Time: {average_waiting(completions):.2f}",
    ]
    return "\n".join(lines) + "\n"


def _work(_args: argparse.Namespace, tokens: Iterator[int]) -> str:
    _prompt("Enter number of processes: ")
    count = _read_count(tokens)
    _prompt("Enter time quantum: ")
    quantum = next(tokens)
    arrivals, bursts = [], []
    for pid in range(1, count + 1):
        print(f"\nEnter details for process {pid}:")
        _prompt("Arrival time: ")
        arrivals.append(next(tokens))
        _prompt("Burst time: ")
        bursts.append(next(tokens))
    return format_table(schedule(make_jobs(arrivals, bursts), quantum))


def main(argv=None) -> int:
    """Read processes and a quantum from standard input; print the schedule."""
    parser = argparse.ArgumentParser(
        prog="round-robin", description="Round-robin scheduling."
    )
    return _run_cli(parser, argv, _work, error_prefix="\n")