"""Disk scheduling simulations: FCFS, SCAN and C-SCAN head movement."""

from __future__ import annotations

import argparse
from itertools import pairwise
from typing import Iterable, Sequence


def _positions(requests: Iterable[int]) -> list[int]:
    return [int(request) for request in requests]


def _check_disk(requests: list[int], head: int, disk_size: int) -> int:
    """Validate a request queue against a disk and return its last cylinder."""
    if disk_size < 1:
        raise ValueError("disk size must be positive")
    if not requests:
        raise ValueError("at least one request is required")
    last = disk_size - 1
    for position in (*requests, head):
        if not 0 <= position <= last:
            raise ValueError(f"cylinder {position} is outside the disk (0..{last})")
    return last


def fcfs_disk(requests: Iterable[int], head: int) -> int:
    """Total head movement when requests are served in the order given."""
    path = [int(head), *_positions(requests)]
    return sum(abs(after - before) for before, after in pairwise(path))


def scan(requests: Iterable[int], head: int, disk_size: int, toward_high: bool = True) -> int:
    """Total head movement of the elevator algorithm.

    Moving low, the head sweeps down to cylinder 0 and back up to the highest
    request. Moving high, it sweeps up to the last cylinder and back down to
    the lowest request.
    """
    positions = _positions(requests)
    last = _check_disk(positions, head, disk_size)
    if toward_high:
        return (last - head) + (last - min(positions))
    return head + max(positions)


def c_scan(requests: Iterable[int], head: int, disk_size: int) -> int:
    """Total head movement of circular SCAN, counting the return sweep.

    The head moves up to the last cylinder, jumps back to cylinder 0 and
    continues up to the highest request that lies below the starting head.
    """
    positions = _positions(requests)
    last = _check_disk(positions, head, disk_size)
    below = [position for position in positions if position < head]
    if not below:
        return last - head
    return (last - head) + last + max(below)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a disk scheduling simulation from the command line."""
    parser = argparse.ArgumentParser(prog="ossim-disk", description=__doc__)
    commands = parser.add_subparsers(dest="algorithm", required=True)

    first = commands.add_parser("fcfs")
    first.add_argument("--head", type=int, required=True)
    first.add_argument("requests", type=int, nargs="+")

    elevator = commands.add_parser("scan")
    elevator.add_argument("--disk-size", type=int, required=True)
    elevator.add_argument("--head", type=int, required=True)
    elevator.add_argument("--direction", choices=("low", "high"), default="high")
    elevator.add_argument("requests", type=int, nargs="+")

    circular = commands.add_parser("cscan")
    circular.add_argument("--disk-size", type=int, required=True)
    circular.add_argument("--head", type=int, required=True)
    circular.add_argument("requests", type=int, nargs="+")

    args = parser.parse_args(argv)
    try:
        if args.algorithm == "fcfs":
            total = fcfs_disk(args.requests, args.head)
            label = "Total Head Movement is"
        elif args.algorithm == "scan":
            total = scan(args.requests, args.head, args.disk_size, args.direction == "high")
            label = "Total Head Movement is"
        else:
            total = c_scan(args.requests, args.head, args.disk_size)
            label = "Seek Time"
    except ValueError as error:
        parser.error(str(error))
    print(f"{label} : {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())