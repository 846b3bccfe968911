"""Preemptive priority CPU scheduling (a lower number is a higher priority)."""

from __future__ import annotations

import argparse
from typing import Iterable, Iterator

from osalgos.fcfs import _read_columns, _run_cli, _space_table
from osalgos.model import Completion, Job, make_jobs
from osalgos.sjf import _dispatch


def schedule(jobs: Iterable[Job]) -> list[Completion]:
    """Run the highest-priority arrived job for one time unit at a time.

    Ties go to the job that arrived first. Completions come back ordered
    by arrival time.
    """
    jobs = list(jobs)
    if any(job.burst <= 0 for job in jobs):
        raise ValueError("burst times must be positive")
    return _dispatch(jobs, lambda job, _left: job.priority, preemptive=True)


def format_table(completions: Iterable[Completion]) -> str:
    """Render completions, with priorities, followed by averages."""
    return _space_table(
        "P AT BT Pri CT WT TAT",
        completions,
        lambda done: (
            done.job.pid,
            done.job.arrival,
            done.job.burst,
            done.job.priority,
            done.completion,
            done.waiting,
            done.turnaround,
        ),
    )


def _work(_args: argparse.Namespace, tokens: Iterator[int]) -> str:
    columns = _read_columns(tokens, ("arrival time", "burst time", "priority"))
    return format_table(schedule(make_jobs(*columns)))


def main(argv=None) -> int:
    """Read processes from standard input and print the priority schedule."""
    parser = argparse.ArgumentParser(
        prog="priority", description="Preemptive priority scheduling."
    )
    return _run_cli(parser, argv, _work)