"""Process records and helpers shared by the CPU scheduling simulations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Job:
    """A process handed to a scheduler."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0


@dataclass(frozen=True)
class Completion:
    """The moment a job finished, with the times derived from it."""

    job: Job
    completion: int

    @property
    def turnaround(self) -> int:
        """Time from arrival to completion."""
        return self.completion - self.job.arrival

    @property
    def waiting(self) -> int:
        """Time spent ready but not running."""
        return self.turnaround - self.job.burst


def make_jobs(
    arrivals: Iterable[int],
    bursts: Iterable[int],
    priorities: Optional[Iterable[int]] = None,
) -> list[Job]:
    """Build jobs numbered from 1 out of parallel sequences of times."""
    arrivals = list(arrivals)
    bursts = list(bursts)
    priorities = [0] * len(arrivals) if priorities is None else list(priorities)
    if not len(arrivals) == len(bursts) == len(priorities):
        raise ValueError(
            "arrivals, bursts and priorities must have the same length"
        )
    return [
        Job(pid, arrival, burst, priority)
        for pid, (arrival, burst, priority) in enumerate(
            zip(arrivals, bursts, priorities), start=1
        )
    ]


def _average(values: list[int]) -> float:
    if not values:
        return math.nan
    return sum(values) / len(values)


def average_waiting(completions: Iterable[Completion]) -> float:
    """Mean waiting time; NaN when there are no completions."""
    return _average([c.waiting for c in completions])


def average_turnaround(completions: Iterable[Completion]) -> float:
    """Mean turnaround time; NaN when there are no completions."""
    return _average([c.turnaround for c in completions])


def read_ints(text: str) -> list[int]:
    """Parse whitespace-separated integers."""
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None
    return values