"""Page replacement simulations: FIFO, LRU and LFU."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class PageStep:
    """One page reference and the frame contents after it; ``None`` is an empty frame."""

    page: int
    frames: tuple[int | None, ...]
    hit: bool


@dataclass(frozen=True)
class PageTrace:
    """The sequence of steps of a replacement run."""

    steps: tuple[PageStep, ...]

    def faults(self) -> int:
        return sum(not step.hit for step in self.steps)


def _check_frames(frame_count: int) -> None:
    if frame_count < 1:
        raise ValueError("at least one frame is required")


def fifo(pages: Iterable[int], frame_count: int) -> PageTrace:
    """Replace the page that was loaded earliest."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    position = 0
    steps = []
    for page in pages:
        hit = page in frames
        if not hit:
            frames[position] = page
            position = (position + 1) % frame_count
        steps.append(PageStep(page, tuple(frames), hit))
    return PageTrace(tuple(steps))


def lru(pages: Iterable[int], frame_count: int) -> PageTrace:
    """Replace the least recently used page.

    While the reference index is below the frame count a miss fills the frame
    of that index; afterwards the frame with the oldest use stamp is replaced,
    empty frames counting as stamped at time 0.
    """
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    stamps = [0] * frame_count
    clock = 0
    steps = []
    for index, page in enumerate(pages):
        hit = page in frames
        if hit:
            slot = frames.index(page)
        else:
            if index < frame_count:
                slot = index
            else:
                slot = min(range(frame_count), key=stamps.__getitem__)
            frames[slot] = page
        stamps[slot] = clock
        clock += 1
        steps.append(PageStep(page, tuple(frames), hit))
    return PageTrace(tuple(steps))


def lfu(pages: Iterable[int], frame_count: int) -> PageTrace:
    """Replace the least frequently used page; ties go to the lowest frame."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    counts = [0] * frame_count
    steps = []
    for page in pages:
        hit = page in frames
        if hit:
            counts[frames.index(page)] += 1
        else:
            slot = min(range(frame_count), key=counts.__getitem__)
            frames[slot] = page
            counts[slot] = 1
        steps.append(PageStep(page, tuple(frames), hit))
    return PageTrace(tuple(steps))


_ALGORITHMS = {"fifo": fifo, "lru": lru, "lfu": lfu}


def _render(trace: PageTrace) -> str:
    lines = ["Page\tFrames"]
    for step in trace.steps:
        cells = "\t".join("_" if frame is None else str(frame) for frame in step.frames)
        marker = "\thit" if step.hit else ""
        lines.append(f"{step.page}\t{cells}{marker}")
    lines.append(f"Number of page faults : {trace.faults()}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a page replacement simulation from the command line."""
    parser = argparse.ArgumentParser(prog="ossim-pages", description=__doc__)
    parser.add_argument("algorithm", choices=sorted(_ALGORITHMS))
    parser.add_argument("--frames", type=int, required=True)
    parser.add_argument("pages", type=int, nargs="+")
    args = parser.parse_args(argv)
    try:
        trace = _ALGORITHMS[args.algorithm](args.pages, args.frames)
    except ValueError as error:
        parser.error(str(error))
    print(_render(trace))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())