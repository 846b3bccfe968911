import io

import pytest

from osalgos.model import average_turnaround, average_waiting, make_jobs
from osalgos.sjf import (
    format_table,
    main,
    schedule_non_preemptive,
    schedule_preemptive,
)

BOTH = [schedule_non_preemptive, schedule_preemptive]


@pytest.fixture
def textbook_jobs():
    return make_jobs([0, 1, 2, 3], [8, 4, 9, 5])


@pytest.mark.parametrize(
    "run, expected",
    [
        (schedule_non_preemptive, [8, 12, 26, 17]),
        (schedule_preemptive, [17, 5, 26, 10]),
    ],
)
def test_worked_example(run, expected, textbook_jobs):
    assert [c.completion for c in run(textbook_jobs)] == expected


@pytest.mark.parametrize("run", BOTH)
def test_schedule_is_consistent(run, textbook_jobs):
    completions = run(textbook_jobs)
    assert sorted(c.job.pid for c in completions) == [1, 2, 3, 4]
    assert all(c.waiting >= 0 for c in completions)
    assert max(c.completion for c in completions) == sum(
        job.burst for job in textbook_jobs
    )


def test_results_are_ordered_by_arrival():
    completions = schedule_non_preemptive(make_jobs([6, 0, 3], [2, 4, 1]))
    assert [c.job.arrival for c in completions] == [0, 3, 6]


def test_non_preemptive_runs_shortest_first_when_all_arrive_together():
    jobs = make_jobs([0, 0, 0, 0], [7, 2, 5, 3])
    by_finish = sorted(schedule_non_preemptive(jobs), key=lambda c: c.completion)
    assert [c.job for c in by_finish] == sorted(jobs, key=lambda job: job.burst)


def test_preemptive_matches_non_preemptive_when_all_arrive_together():
    jobs = make_jobs([0, 0, 0, 0], [7, 2, 5, 2])
    assert schedule_preemptive(jobs) == schedule_non_preemptive(jobs)


@pytest.mark.parametrize("run", BOTH)
def test_idle_until_late_arrival(run):
    (only,) = run(make_jobs([5], [3]))
    assert (only.completion, only.waiting) == (8, 0)


@pytest.mark.parametrize(
    "run, unwaiting_pid", [(schedule_non_preemptive, 1), (schedule_preemptive, 2)]
)
def test_short_arrival_during_long_job(run, unwaiting_pid):
    completions = run(make_jobs([0, 1], [10, 1]))
    assert [c.job.pid for c in completions if c.waiting == 0] == [unwaiting_pid]
    assert max(c.completion for c in completions) == 11


@pytest.mark.parametrize(
    "run, burst", [(schedule_preemptive, 0), (schedule_non_preemptive, -1)]
)
def test_rejects_bad_burst(run, burst):
    with pytest.raises(ValueError):
        run(make_jobs([0], [burst]))


def test_empty_input_gives_no_completions():
    assert schedule_non_preemptive([]) == []
    assert schedule_preemptive([]) == []


def test_format_table_layout(textbook_jobs):
    completions = schedule_preemptive(textbook_jobs)
    header, *rows, waiting, turnaround = format_table(completions).splitlines()
    assert header == "P AT BT CT WT TAT"
    assert [[int(x) for x in row.split()] for row in rows] == [
        [c.job.pid, c.job.arrival, c.job.burst, c.completion, c.waiting, c.turnaround]
        for c in completions
    ]
    label, value = waiting.split(":")
    assert label == "Average waiting time is "
    assert float(value) == pytest.approx(average_waiting(completions))
    label, value = turnaround.split(":")
    assert label == "Average turn around time is "
    assert float(value) == pytest.approx(average_turnaround(completions))


@pytest.mark.parametrize(
    "flags, stdin, status, stream, text",
    [
        ([], "4\n0 1 2 3\n8 4 9 5\n", 0, "out", "P AT BT CT WT TAT"),
        (["--preemptive"], "4\n0 1 2 3\n8 4 9 5\n", 0, "out", "of all the processes"),
        ([], "3\n0 1\n", 1, "err", "unexpected end of input"),
        ([], "two\n", 1, "err", "not an integer"),
    ],
)
def test_main(monkeypatch, capsys, flags, stdin, status, stream, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main(flags) == status
    assert text in getattr(capsys.readouterr(), stream)