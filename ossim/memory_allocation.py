"""Contiguous memory allocation: first fit, best fit and worst fit."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence


@dataclass(frozen=True)
class Allocation:
    """Where one record was placed; ``block`` is ``None`` if it did not fit."""

    record: int
    block: int | None = None
    block_size: int | None = None
    remaining: int | None = None

    @property
    def allocated(self) -> bool:
        return self.block is not None


_Chooser = Callable[[list[int], list[int]], int]


def _sizes(values: Iterable[int], what: str) -> list[int]:
    sizes = [int(value) for value in values]
    if any(size < 0 for size in sizes):
        raise ValueError(f"{what} sizes must not be negative")
    return sizes


def _allocate(blocks: Iterable[int], records: Iterable[int], choose: _Chooser) -> list[Allocation]:
    sizes = _sizes(blocks, "block")
    wanted = _sizes(records, "record")
    free = list(sizes)
    placed = []
    for record in wanted:
        candidates = [index for index, size in enumerate(free) if size >= record]
        if not candidates:
            placed.append(Allocation(record))
            continue
        slot = choose(candidates, free)
        free[slot] -= record
        placed.append(Allocation(record, slot, sizes[slot], free[slot]))
    return placed


def first_fit(blocks: Iterable[int], records: Iterable[int]) -> list[Allocation]:
    """Place each record in the first block with enough free space."""
    return _allocate(blocks, records, lambda candidates, free: candidates[0])


def best_fit(blocks: Iterable[int], records: Iterable[int]) -> list[Allocation]:
    """Place each record in the smallest block that fits; ties go to the last block."""
    return _allocate(
        blocks, records, lambda candidates, free: min(reversed(candidates), key=free.__getitem__)
    )


def worst_fit(blocks: Iterable[int], records: Iterable[int]) -> list[Allocation]:
    """Place each record in the largest block that fits; ties go to the last block."""
    return _allocate(
        blocks, records, lambda candidates, free: max(reversed(candidates), key=free.__getitem__)
    )


def _render(title: str, placed: list[Allocation]) -> str:
    lines = [f"---------------- {title} ----------------"]
    for item in placed:
        if item.allocated:
            lines.append(
                f"Record {item.record}K fits in Block {item.block_size}K"
                f"    Remaining => {item.remaining}K"
            )
        else:
            lines.append(f"Record {item.record}K cannot be allocated")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run all three allocation strategies over the same blocks and records."""
    parser = argparse.ArgumentParser(prog="ossim-memory", description=__doc__)
    parser.add_argument("--blocks", type=int, nargs="+", required=True)
    parser.add_argument("--records", type=int, nargs="+", required=True)
    args = parser.parse_args(argv)
    strategies = (("First Fit", first_fit), ("Best Fit", best_fit), ("Worst Fit", worst_fit))
    try:
        sections = [_render(title, run(args.blocks, args.records)) for title, run in strategies]
    except ValueError as error:
        parser.error(str(error))
    print("\n\n".join(sections))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())