# osalgos

Small, readable implementations of algorithms met in a first
operating-systems course:

- CPU scheduling: first-come-first-served, shortest job first
  (non-preemptive and preemptive), preemptive priority and round robin
- a bounded first-in, first-out producer/consumer buffer
- bubble sort

Everything is plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

### Jobs and completions

`osalgos.model` holds the shared records:

- `Job(pid, arrival, burst, priority=0)` – a frozen dataclass describing
  a process.
- `Completion(job, completion)` – the time a job finished, with the
  properties `turnaround` (completion minus arrival) and `waiting`
  (turnaround minus burst).
- `make_jobs(arrivals, bursts, priorities=None)` builds jobs numbered
  from 1 out of parallel sequences; it raises `ValueError` if their
  lengths differ. Without priorities every job gets priority 0.
- `average_waiting(completions)` and `average_turnaround(completions)`
  return the mean as a float, or NaN when there are no completions.
- `read_ints(text)` parses whitespace-separated integers and raises
  `ValueError` naming the first token that is not one.

### Schedulers

Each scheduler takes jobs and returns a list of `Completion`s.

```python
from osalgos.model import make_jobs, average_waiting, average_turnaround
from osalgos import fcfs, sjf, priority, round_robin

jobs = make_jobs([0, 1, 2], [5, 3, 1], [2, 1, 3])

done = fcfs.schedule(jobs)
print(fcfs.format_table(done))
print(average_waiting(done), average_turnaround(done))

print(sjf.format_table(sjf.schedule_non_preemptive(jobs)))
print(sjf.format_table(sjf.schedule_preemptive(jobs)))
print(priority.format_table(priority.schedule(jobs)))
print(round_robin.format_table(round_robin.schedule(jobs, 2)))
```

- `fcfs.schedule(jobs)` runs the jobs in the order they are given,
  idling until each one arrives. Results come back in that same order.
  `fcfs.format_table` prints an aligned table; `fcfs.format_compact_table`
  prints space-separated columns `P BT AT CT WT TAT`.
- `sjf.schedule_non_preemptive(jobs)` runs the shortest arrived job to
  completion, then chooses again. Burst times must not be negative.
- `sjf.schedule_preemptive(jobs)` re-decides after every time unit,
  choosing the arrived job with the least remaining time. Burst times
  must be positive.
- `priority.schedule(jobs)` re-decides after every time unit, choosing
  the arrived job with the smallest priority number (a smaller number is
  a higher priority). Burst times must be positive.
- `round_robin.schedule(jobs, quantum)` sweeps the jobs in arrival order,
  giving each arrived, unfinished job up to `quantum` units; a sweep that
  runs nothing advances the clock by one. The quantum must be positive
  and burst times must not be negative.

For SJF, priority and round robin, ties go to the job that arrived
first and completions come back ordered by arrival time. Invalid input
raises `ValueError`. Each of these modules has a `format_table`
function that renders completions followed by average waiting and
turnaround times.

### Bounded buffer

`BoundedBuffer(capacity)` hands items out in the order they were
produced. `produce` raises `BufferFullError` on a full buffer, `consume`
raises `BufferEmptyError` on an empty one, and a negative capacity
raises `ValueError`. It supports `len()`, iteration (front to back),
`is_full()` and `is_empty()`.

```python
from osalgos.buffer import BoundedBuffer

table = BoundedBuffer(2)
table.produce(7)
table.produce(9)
table.is_full()      # True
table.consume()      # 7
```

### Sorting

```python
from osalgos.sorting import bubble_sort

bubble_sort([5, 1, 4, 2])   # [1, 2, 4, 5]
```

`bubble_sort` returns a new list and leaves its input untouched.

## Command-line tools

Each command prompts for its input, reads integers from standard input
and prints its results. On malformed or missing input it prints an
error to standard error and exits with status 1.

```
osalgos-sort            # a count, then that many integers; prints them sorted
osalgos-fcfs            # count, then arrival and burst time per process
osalgos-fcfs --compact  # count, all arrival times, then all burst times
osalgos-sjf             # count, all arrival times, then all burst times
osalgos-sjf --preemptive
osalgos-priority        # count, arrival times, burst times, then priorities
osalgos-round-robin     # count, quantum, then arrival and burst per process
osalgos-buffer
```

`osalgos-buffer` asks for a table size, then runs a menu: `1` produces
an item onto the table, `2` consumes the oldest item, `3` exits. A full
or empty table is reported and the menu continues; any other choice is
reported as invalid.

## What this package does not do

The producer/consumer buffer is a plain single-threaded queue driven by
a menu. It provides no locking, blocking or waiting between threads or
processes; "Chef waits" and "Customer waits" are only messages.