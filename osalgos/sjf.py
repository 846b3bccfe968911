"""Shortest-job-first CPU scheduling, with and without preemption."""

from __future__ import annotations

import argparse
from typing import Callable, Iterable, Iterator

from osalgos.fcfs import _read_columns, _run_cli, _space_table
from osalgos.model import Completion, Job, make_jobs


def _by_arrival(jobs: Iterable[Job]) -> list[Job]:
    return sorted(jobs, key=lambda job: job.arrival)


def _completions(ordered: list[Job], finished: dict[int, int]) -> list[Completion]:
    return [Completion(job, finished[index]) for index, job in enumerate(ordered)]


def _dispatch(
    jobs: Iterable[Job], rank: Callable[[Job, int], int], preemptive: bool
) -> list[Completion]:
    """Repeatedly run the arrived job of lowest rank.

    rank receives a job and its remaining time. A preemptive dispatcher
    re-decides after every time unit; otherwise the chosen job runs to the
    end. Ties go to the job that arrived first, and completions come back
    ordered by arrival time.
    """
    ordered = _by_arrival(jobs)
    remaining = [job.burst for job in ordered]
    finished: dict[int, int] = {}
    clock = 0
    while len(finished) < len(ordered):
        pending = [index for index in range(len(ordered)) if index not in finished]
        ready = [index for index in pending if ordered[index].arrival <= clock]
        if not ready:
            clock = min(ordered[index].arrival for index in pending)
            continue
        pick = min(ready, key=lambda index: rank(ordered[index], remaining[index]))
        spent = 1 if preemptive else remaining[pick]
        remaining[pick] -= spent
        clock += spent
        if remaining[pick] == 0:
            finished[pick] = clock
    return _completions(ordered, finished)


def schedule_non_preemptive(jobs: Iterable[Job]) -> list[Completion]:
    """Run the shortest arrived job to completion, then choose again.

    Ties go to the job that arrived first. Completions come back ordered
    by arrival time.
    """
    jobs = list(jobs)
    if any(job.burst < 0 for job in jobs):
        raise ValueError("burst times cannot be negative")
    return _dispatch(jobs, lambda job, _left: job.burst, preemptive=False)


def schedule_preemptive(jobs: Iterable[Job]) -> list[Completion]:
    """Shortest remaining time first, re-deciding after every time unit.

    Ties go to the job that arrived first. Completions come back ordered
    by arrival time.
    """
    jobs = list(jobs)
    if any(job.burst <= 0 for job in jobs):
        raise ValueError("burst times must be positive")
    return _dispatch(jobs, lambda _job, left: left, preemptive=True)


def format_table(completions: Iterable[Completion]) -> str:
    """Render completions as space-separated columns followed by averages."""
    return _space_table(
        "P AT BT CT WT TAT",
        completions,
        lambda done: (
            done.job.pid,
            done.job.arrival,
            done.job.burst,
            done.completion,
            done.waiting,
            done.turnaround,
        ),
    )


def _work(args: argparse.Namespace, tokens: Iterator[int]) -> str:
    which = "all the processes" if args.preemptive else "the processes"
    jobs = make_jobs(*_read_columns(tokens, ("arrival time", "burst time"), which))
    run = schedule_preemptive if args.preemptive else schedule_non_preemptive
    return format_table(run(jobs))


def main(argv=None) -> int:
    """Read processes from standard input and print the SJF schedule."""
    parser = argparse.ArgumentParser(
        prog="sjf", description="Shortest-job-first scheduling."
    )
    parser.add_argument(
        "--preemptive",
        action="store_true",
        help="preempt for a job with a shorter remaining time",
    )
    return _run_cli(parser, argv, _work)