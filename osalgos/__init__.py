"""Operating-systems algorithms: FCFS, SJF, priority and round-robin schedulers, a bounded buffer and bubble sort."""

__version__ = "0.1.0"