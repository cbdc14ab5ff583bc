"""Bounded-buffer producer/consumer guarded by counting semaphores."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence


class BufferFullError(Exception):
    """Raised when producing into a full buffer."""


class BufferEmptyError(Exception):
    """Raised when consuming from an empty buffer."""


class ProducerConsumer:
    """A buffer of fixed capacity tracked by ``mutex``, ``full`` and ``empty`` counters."""

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.mutex = 1
        self.full = 0
        self.empty = capacity
        self.item = 0

    def produce(self) -> int:
        """Add an item and return its number."""
        if self.mutex != 1 or self.empty == 0:
            raise BufferFullError("buffer is full")
        self.mutex -= 1
        self.full += 1
        self.empty -= 1
        self.item += 1
        self.mutex += 1
        return self.item

    def consume(self) -> int:
        """Remove the most recent item and return its number."""
        if self.mutex != 1 or self.full == 0:
            raise BufferEmptyError("buffer is empty")
        self.mutex -= 1
        self.full -= 1
        self.empty += 1
        consumed = self.item
        self.item -= 1
        self.mutex += 1
        return consumed


def main(argv: Sequence[str] | None = None) -> int:
    """Read choices from standard input: 1 produces, 2 consumes, 3 exits."""
    parser = argparse.ArgumentParser(prog="ossim-semaphore", description=__doc__)
    parser.add_argument("--capacity", type=int, default=3)
    args = parser.parse_args(argv)
    try:
        buffer = ProducerConsumer(args.capacity)
    except ValueError as error:
        parser.error(str(error))

    print("1. Produce    2. Consume    3. Exit")
    for line in sys.stdin:
        choice = line.strip()
        if choice == "1":
            try:
                print(f"Item {buffer.produce()} is produced")
            except BufferFullError:
                print("Buffer is full")
        elif choice == "2":
            try:
                print(f"Item {buffer.consume()} is consumed")
            except BufferEmptyError:
                print("Buffer is empty")
        elif choice == "3":
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())