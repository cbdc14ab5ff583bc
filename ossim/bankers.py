"""Banker's algorithm: need matrix and safety check."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Sequence

Matrix = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class SafetyResult:
    """Outcome of a safety check: the order processes can finish in, and their needs."""

    sequence: tuple[int, ...]
    need: Matrix

    @property
    def safe(self) -> bool:
        return len(self.sequence) == len(self.need)


def _matrix(rows: Iterable[Iterable[int]]) -> Matrix:
    return tuple(tuple(int(value) for value in row) for row in rows)


def need_matrix(allocation: Iterable[Iterable[int]], maximum: Iterable[Iterable[int]]) -> Matrix:
    """Remaining need of every process: maximum minus allocation."""
    alloc = _matrix(allocation)
    limits = _matrix(maximum)
    if len(alloc) != len(limits):
        raise ValueError("allocation and maximum need one row per process")
    widths = {len(row) for row in (*alloc, *limits)}
    if len(widths) > 1:
        raise ValueError("every row needs one value per resource")
    need = tuple(
        tuple(most - held for held, most in zip(held_row, most_row))
        for held_row, most_row in zip(alloc, limits)
    )
    if any(value < 0 for row in need for value in row):
        raise ValueError("allocation exceeds the declared maximum")
    return need


def safety_check(
    allocation: Iterable[Iterable[int]],
    maximum: Iterable[Iterable[int]],
    available: Iterable[int],
) -> SafetyResult:
    """Find an order in which every process can finish.

    Processes are scanned in index order, repeatedly; a process whose need
    fits in the work vector finishes and releases its allocation at once.
    """
    alloc = _matrix(allocation)
    need = need_matrix(alloc, maximum)
    work = [int(value) for value in available]
    if need and len(work) != len(need[0]):
        raise ValueError("available needs one value per resource")

    finished = [False] * len(need)
    sequence: list[int] = []
    progress = True
    while progress:
        progress = False
        for pid, (need_row, held_row) in enumerate(zip(need, alloc)):
            if finished[pid] or any(want > have for want, have in zip(need_row, work)):
                continue
            work = [have + held for have, held in zip(work, held_row)]
            finished[pid] = True
            sequence.append(pid)
            progress = True
    return SafetyResult(tuple(sequence), need)


def _row(text: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in text.replace(",", " ").split())
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"invalid row: {text!r}") from error


def main(argv: Sequence[str] | None = None) -> int:
    """Run the safety check from the command line, one row per process."""
    parser = argparse.ArgumentParser(prog="ossim-bankers", description=__doc__)
    parser.add_argument("--allocation", type=_row, action="append", required=True)
    parser.add_argument("--maximum", type=_row, action="append", required=True)
    parser.add_argument("--available", type=int, nargs="+", required=True)
    args = parser.parse_args(argv)
    try:
        result = safety_check(args.allocation, args.maximum, args.available)
    except ValueError as error:
        parser.error(str(error))
    print("Process\tNeed")
    for pid, row in enumerate(result.need):
        print(f"p{pid}\t" + "  ".join(map(str, row)))
    print("Sequence: " + "\t".join(f"p{pid}" for pid in result.sequence))
    print("The system is safe" if result.safe else "The system is not safe")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())