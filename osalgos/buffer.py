"""A bounded first-in, first-out buffer and an interactive producer/consumer."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Iterator, TextIO


class BufferFullError(Exception):
    """Raised when producing into a full buffer."""


class BufferEmptyError(Exception):
    """Raised when consuming from an empty buffer."""


class BoundedBuffer:
    """A queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items: deque = deque()

    def produce(self, item) -> None:
        """Append an item at the back."""
        if self.is_full():
            raise BufferFullError("buffer is full")
        self._items.append(item)

    def consume(self):
        """Remove and return the item at the front."""
        if self.is_empty():
            raise BufferEmptyError("buffer is empty")
        return self._items.popleft()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(list(self._items))


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv=None) -> int:
    """Run the menu-driven producer/consumer simulation on standard input."""
    parser = argparse.ArgumentParser(
        prog="producer-consumer",
        description="Simulate a chef and customers sharing a table.",
    )
    parser.parse_args(argv)
    words = _words(sys.stdin)
    _prompt("Enter size of table (buffer size): ")
    try:
        table = BoundedBuffer(int(next(words)))
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    while True:
        print("\n1. Produce\n2. Consume\n3. Exit")
        _prompt("Enter your choice: ")
        word = next(words, None)
        if word is None:
            print()
            return 0
        try:
            choice = int(word)
        except ValueError:
            choice = None

        if choice == 1:
            if table.is_full():
                print("Table full! Chef waits...")
                continue
            _prompt("Enter item to produce (food ID): ")
            word = next(words, None)
            if word is None:
                print("\nerror: unexpected end of input", file=sys.stderr)
                return 1
            try:
                item = int(word)
            except ValueError:
                print(f"\nerror: not an integer: {word!r}", file=sys.stderr)
                return 1
            table.produce(item)
            print(f"Chef produced item: {item}")
        elif choice == 2:
            try:
                item = table.consume()
            except BufferEmptyError:
                print("Table empty! Customer waits...")
            else:
                print(f"Customer consumed item: {item}")
        elif choice == 3:
            print("Exiting...Bye!")
            return 0
        else:
            print("Invalid choice!")