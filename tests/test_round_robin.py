import io

import pytest

from osalgos import fcfs
from osalgos.model import average_turnaround, average_waiting, make_jobs
from osalgos.round_robin import format_table, main, schedule


def test_worked_example():
    completions = schedule(make_jobs([0, 0, 0], [5, 3, 1]), 2)
    assert [c.completion for c in completions] == [9, 8, 5]


@pytest.mark.parametrize(
    "arrivals, bursts, quantum",
    [
        ([0, 2, 4, 6], [5, 3, 1, 4], 1),
        ([0, 2, 4, 6], [5, 3, 1, 4], 3),
        ([0, 0, 0], [4, 7, 2], 2),
        ([0, 0, 0], [4, 7, 2], 4),
    ],
)
def test_schedule_is_consistent(arrivals, bursts, quantum):
    completions = schedule(make_jobs(arrivals, bursts), quantum)
    assert sorted(c.job.pid for c in completions) == list(range(1, len(bursts) + 1))
    assert all(c.waiting >= 0 for c in completions)
    assert max(c.completion for c in completions) == sum(bursts)


def test_large_quantum_matches_fcfs():
    jobs = make_jobs([0, 1, 3, 9], [4, 2, 3, 1])
    assert schedule(jobs, 100) == fcfs.schedule(jobs)


@pytest.mark.parametrize(
    "arrival, burst, completion", [(6, 3, 9), (0, 0, 0)]
)
def test_single_job(arrival, burst, completion):
    (only,) = schedule(make_jobs([arrival], [burst]), 2)
    assert (only.completion, only.waiting) == (completion, 0)


def test_results_are_ordered_by_arrival():
    jobs = make_jobs([5, 0, 2], [1, 2, 3])
    assert [c.job.arrival for c in schedule(jobs, 2)] == [0, 2, 5]


@pytest.mark.parametrize("burst, quantum", [(1, 0), (1, -1), (-2, 2)])
def test_rejects_bad_arguments(burst, quantum):
    with pytest.raises(ValueError):
        schedule(make_jobs([0], [burst]), quantum)


def test_format_table_layout():
    completions = schedule(make_jobs([0, 1, 2], [5, 3, 1]), 2)
    blank, header, *rows, gap, turnaround, waiting = format_table(
        completions
    ).splitlines()
    assert (blank, gap) == ("", "")
    assert header == "PID\tArrival\tBurst\tCompletion\tTurnaround\tWaiting"
    assert all("\t\t" in row for row in rows)
    assert [[int(x) for x in row.split()] for row in rows] == [
        [c.job.pid, c.job.arrival, c.job.burst, c.completion, c.turnaround, c.waiting]
        for c in completions
    ]
    label, value = turnaround.split(": ")
    assert label == "Average Turnaround Time"
    assert float(value) == pytest.approx(average_turnaround(completions), abs=0.005)
    label, value = waiting.split(": ")
    assert label == "Average Waiting Time"
    assert float(value) == pytest.approx(average_waiting(completions), abs=0.005)
    assert len(value.split(".")[1]) == 2


@pytest.mark.parametrize(
    "stdin, status, stream, text",
    [
        ("3\n2\n0 5\n0 3\n0 1\n", 0, "out", "Enter details for process 3:"),
        ("1\n0\n0 5\n", 1, "err", "quantum"),
        ("2\n2\n0 5\n", 1, "err", "unexpected end of input"),
    ],
)
def test_main(monkeypatch, capsys, stdin, status, stream, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == status
    assert text in getattr(capsys.readouterr(), stream)