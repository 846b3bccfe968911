"""Bubble sort."""

from __future__ import annotations

import argparse
from typing import Iterable, Iterator, TypeVar

from osalgos.fcfs import _prompt, _read_count, _run_cli

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with the values in ascending order."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _work(_args: argparse.Namespace, tokens: Iterator[int]) -> str:
    _prompt("enter size of array")
    count = _read_count(tokens, "size")
    values = [next(tokens) for _ in range(count)]
    return "".join(f"{value} " for value in bubble_sort(values)) + "\n"


def main(argv=None) -> int:
    """Read a count and that many integers, then print them sorted."""
    parser = argparse.ArgumentParser(
        prog="bubble-sort", description="Sort integers read from standard input."
    )
    return _run_cli(parser, argv, _work, error_prefix="\n")