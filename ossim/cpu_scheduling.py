"""CPU scheduling simulations: FCFS, non-preemptive SJF, priority and round robin."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the time at which it completed."""

    pid: int
    burst: int
    arrival: int = 0
    priority: int | None = None
    completion: int = 0

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst


@dataclass(frozen=True)
class Schedule:
    """Result of a scheduling run.

    ``processes`` is in the order the results are reported; ``timeline`` holds
    ``(pid, start, end)`` slices in execution order.
    """

    processes: tuple[ScheduledProcess, ...]
    timeline: tuple[tuple[int, int, int], ...]

    def total_turnaround(self) -> int:
        return sum(p.turnaround for p in self.processes)

    def total_waiting(self) -> int:
        return sum(p.waiting for p in self.processes)

    def average_turnaround(self) -> float:
        return self.total_turnaround() / len(self.processes)

    def average_waiting(self) -> float:
        return self.total_waiting() / len(self.processes)


def _require_processes(items: Sequence) -> None:
    if not items:
        raise ValueError("at least one process is required")


def _require_bursts(bursts: Iterable[int]) -> None:
    if any(burst < 0 for burst in bursts):
        raise ValueError("burst times must not be negative")


def fcfs(processes: Iterable[tuple[int, int]]) -> Schedule:
    """First come, first served over ``(arrival, burst)`` pairs.

    Processes run back to back from time 0 in order of arrival.
    """
    entries = [(pid, int(arrival), int(burst)) for pid, (arrival, burst) in enumerate(processes)]
    _require_processes(entries)
    _require_bursts(burst for _, _, burst in entries)
    entries.sort(key=lambda entry: entry[1])

    clock = 0
    done: list[ScheduledProcess] = []
    timeline: list[tuple[int, int, int]] = []
    for pid, arrival, burst in entries:
        start, clock = clock, clock + burst
        timeline.append((pid, start, clock))
        done.append(ScheduledProcess(pid, burst, arrival, completion=clock))
    return Schedule(tuple(done), tuple(timeline))


def sjf(processes: Iterable[tuple[int, int]]) -> Schedule:
    """Non-preemptive shortest job first over ``(arrival, burst)`` pairs.

    The earliest arriving process runs first from time 0; afterwards the
    shortest arrived job runs next, ties going to the earlier arrival.
    """
    entries = [(pid, int(arrival), int(burst)) for pid, (arrival, burst) in enumerate(processes)]
    _require_processes(entries)
    _require_bursts(burst for _, _, burst in entries)
    entries.sort(key=lambda entry: entry[1])

    first_pid, _, first_burst = entries[0]
    clock = first_burst
    completion = {first_pid: clock}
    timeline = [(first_pid, 0, clock)]

    pending = entries[1:]
    while pending:
        ready = [entry for entry in pending if entry[1] <= clock]
        if not ready:
            clock = pending[0][1]
            continue
        chosen = min(ready, key=lambda entry: entry[2])
        pending.remove(chosen)
        pid, _, burst = chosen
        start, clock = clock, clock + burst
        timeline.append((pid, start, clock))
        completion[pid] = clock

    done = tuple(
        ScheduledProcess(pid, burst, arrival, completion=completion[pid])
        for pid, arrival, burst in entries
    )
    return Schedule(done, tuple(timeline))


def priority_schedule(processes: Iterable[tuple[int, int]]) -> Schedule:
    """Non-preemptive priority scheduling over ``(burst, priority)`` pairs.

    All processes arrive at time 0; a lower number means a higher priority.
    """
    entries = [(pid, int(burst), int(prio)) for pid, (burst, prio) in enumerate(processes)]
    _require_processes(entries)
    _require_bursts(burst for _, burst, _ in entries)
    entries.sort(key=lambda entry: entry[2])

    clock = 0
    done: list[ScheduledProcess] = []
    timeline: list[tuple[int, int, int]] = []
    for pid, burst, prio in entries:
        start, clock = clock, clock + burst
        timeline.append((pid, start, clock))
        done.append(ScheduledProcess(pid, burst, 0, priority=prio, completion=clock))
    return Schedule(tuple(done), tuple(timeline))


def round_robin(bursts: Iterable[int], time_slice: int) -> Schedule:
    """Round robin with a fixed time slice; all processes arrive at time 0."""
    burst_list = [int(burst) for burst in bursts]
    _require_processes(burst_list)
    _require_bursts(burst_list)
    if time_slice <= 0:
        raise ValueError("time slice must be positive")

    queue = deque((pid, burst) for pid, burst in enumerate(burst_list) if burst > 0)
    completion = {pid: 0 for pid in range(len(burst_list))}
    timeline: list[tuple[int, int, int]] = []
    clock = 0
    while queue:
        pid, remaining = queue.popleft()
        run = min(remaining, time_slice)
        start, clock = clock, clock + run
        timeline.append((pid, start, clock))
        completion[pid] = clock
        if remaining > run:
            queue.append((pid, remaining - run))

    done = tuple(
        ScheduledProcess(pid, burst, 0, completion=completion[pid])
        for pid, burst in enumerate(burst_list)
    )
    return Schedule(done, tuple(timeline))


def _render(schedule: Schedule, *, show_arrival: bool) -> str:
    lines = ["Gantt Chart"]
    lines.append("|" + "".join(f"  p{pid}  |" for pid, _, _ in schedule.timeline))
    lines.append("0" + "".join(f"{end:>7}" for _, _, end in schedule.timeline))
    headers = ["Process", "Burst"]
    if show_arrival:
        headers.append("Arrival")
    headers += ["Turnaround", "Waiting"]
    lines.append("".join(f"{header:<12}" for header in headers))
    for proc in schedule.processes:
        cells = [f"p{proc.pid}", proc.burst]
        if show_arrival:
            cells.append(proc.arrival)
        cells += [proc.turnaround, proc.waiting]
        lines.append("".join(f"{cell!s:<12}" for cell in cells))
    lines.append(f"Total Turn Around Time : {schedule.total_turnaround()}")
    lines.append(f"Total Waiting Time : {schedule.total_waiting()}")
    lines.append(f"Average Turn Around Time : {schedule.average_turnaround():f}")
    lines.append(f"Average Waiting Time : {schedule.average_waiting():f}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a CPU scheduling simulation from the command line."""
    parser = argparse.ArgumentParser(prog="ossim-cpu", description=__doc__)
    commands = parser.add_subparsers(dest="algorithm", required=True)

    for name in ("fcfs", "sjf"):
        sub = commands.add_parser(name)
        sub.add_argument("--arrival", type=int, nargs="+", required=True)
        sub.add_argument("--burst", type=int, nargs="+", required=True)

    prio = commands.add_parser("priority")
    prio.add_argument("--burst", type=int, nargs="+", required=True)
    prio.add_argument("--priority", type=int, nargs="+", required=True)

    rr = commands.add_parser("rr")
    rr.add_argument("--burst", type=int, nargs="+", required=True)
    rr.add_argument("--slice", type=int, required=True, dest="time_slice")

    args = parser.parse_args(argv)
    try:
        if args.algorithm in ("fcfs", "sjf"):
            if len(args.arrival) != len(args.burst):
                parser.error("--arrival and --burst need the same number of values")
            algorithm = fcfs if args.algorithm == "fcfs" else sjf
            schedule = algorithm(zip(args.arrival, args.burst))
            show_arrival = True
        elif args.algorithm == "priority":
            if len(args.priority) != len(args.burst):
                parser.error("--burst and --priority need the same number of values")
            schedule = priority_schedule(zip(args.burst, args.priority))
            show_arrival = False
        else:
            schedule = round_robin(args.burst, args.time_slice)
            show_arrival = False
    except ValueError as error:
        parser.error(str(error))
    print(_render(schedule, show_arrival=show_arrival))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())