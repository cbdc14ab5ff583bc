# ossim

Small, readable simulators for the algorithms taught in an operating-systems
course. Each one is a plain library function and also a command that takes
its input as command-line arguments and prints the result.

## What is included

| Area               | Module                     | Public names                                      |
|--------------------|----------------------------|---------------------------------------------------|
| CPU scheduling     | `ossim.cpu_scheduling`     | `fcfs`, `sjf`, `priority_schedule`, `round_robin`, `Schedule`, `ScheduledProcess` |
| Page replacement   | `ossim.page_replacement`   | `fifo`, `lru`, `lfu`, `PageTrace`, `PageStep`     |
| Disk scheduling    | `ossim.disk_scheduling`    | `fcfs_disk`, `scan`, `c_scan`                     |
| Memory allocation  | `ossim.memory_allocation`  | `first_fit`, `best_fit`, `worst_fit`, `Allocation` |
| Deadlock avoidance | `ossim.bankers`            | `need_matrix`, `safety_check`, `SafetyResult`     |
| Synchronisation    | `ossim.semaphore`          | `ProducerConsumer`, `BufferFullError`, `BufferEmptyError` |

No third-party packages are needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it as a library

### CPU scheduling

- `fcfs(processes)` and `sjf(processes)` take `(arrival, burst)` pairs.
  FCFS runs processes back to back from time 0 in order of arrival. SJF is
  non-preemptive: the earliest arriving process runs first, then the shortest
  job that has arrived, ties going to the earlier arrival.
- `priority_schedule(processes)` takes `(burst, priority)` pairs; everything
  arrives at time 0 and a lower number is a higher priority.
- `round_robin(bursts, time_slice)` takes burst times; everything arrives at
  time 0.

Each returns a `Schedule`. Its `processes` is a tuple of `ScheduledProcess`
(`pid`, `burst`, `arrival`, `priority`, `completion`, and the properties
`turnaround` and `waiting`); its `timeline` holds `(pid, start, end)` slices
in execution order. `total_turnaround()`, `total_waiting()`,
`average_turnaround()` and `average_waiting()` summarise it. Process ids are
the positions in the input. An empty input, a negative burst or a
non-positive time slice raises `ValueError`.

```python
from ossim.cpu_scheduling import round_robin

schedule = round_robin([5, 3, 1], time_slice=2)
print(schedule.timeline)
print(schedule.average_waiting())
```

### Page replacement

`fifo`, `lru` and `lfu` take a sequence of page numbers and a frame count and
return a `PageTrace`. Each `PageStep` records the page, the frame contents
after the reference (`None` for an empty frame) and whether it was a hit;
`faults()` counts the misses. Fewer than one frame raises `ValueError`.

```python
from ossim.page_replacement import fifo, lru

pages = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
print(fifo(pages, 3).faults())
print(lru(pages, 3).faults())
```

### Disk scheduling

Each function returns the total head movement as an integer.

- `fcfs_disk(requests, head)` serves requests in the order given.
- `scan(requests, head, disk_size, toward_high=True)`: moving high, the head
  sweeps to the last cylinder and back to the lowest request; moving low, it
  sweeps to cylinder 0 and back to the highest request.
- `c_scan(requests, head, disk_size)`: the head moves to the last cylinder,
  jumps back to 0 (the return sweep is counted) and continues to the highest
  request below the starting head.

`scan` and `c_scan` raise `ValueError` for a non-positive disk size, an empty
request list, or a cylinder outside the disk.

```python
from ossim.disk_scheduling import fcfs_disk, scan

print(fcfs_disk([98, 183, 37, 122, 14, 124, 65, 67], 53))
print(scan([98, 183, 37, 122, 14, 124, 65, 67], 53, 200, toward_high=False))
```

### Memory allocation

`first_fit`, `best_fit` and `worst_fit` take block sizes and record sizes and
return one `Allocation` per record: `record`, the index of the chosen
`block`, its original `block_size` and the space `remaining` in it, or `None`
for all three when the record does not fit (`allocated` is then `False`).
Best and worst fit break ties in favour of the last block. Negative sizes
raise `ValueError`.

```python
from ossim.memory_allocation import best_fit

for item in best_fit([100, 500, 200, 300, 600], [212, 417, 112, 426]):
    print(item)
```

### Banker's algorithm

`need_matrix(allocation, maximum)` returns maximum minus allocation.
`safety_check(allocation, maximum, available)` returns a `SafetyResult` with
the `sequence` in which processes can finish, the `need` matrix, and `safe`,
which is true when every process finished. Mismatched shapes or an
allocation above the maximum raise `ValueError`.

```python
from ossim.bankers import safety_check

result = safety_check(
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
    available=[3, 3, 2],
)
print(result.safe, result.sequence)
```

### Producer and consumer

`ProducerConsumer(capacity=3)` tracks a bounded buffer with `mutex`, `full`
and `empty` counters. `produce()` returns the new item's number or raises
`BufferFullError`; `consume()` returns the number of the most recent item or
raises `BufferEmptyError`.

```python
from ossim.semaphore import BufferEmptyError, ProducerConsumer

buffer = ProducerConsumer()
try:
    buffer.consume()
except BufferEmptyError:
    print("nothing to consume yet")
buffer.produce()
buffer.consume()
```

## Commands

Every command takes its input as arguments; `--help` lists them.

```
ossim-cpu fcfs --arrival 0 1 2 --burst 5 3 1
ossim-cpu sjf --arrival 0 1 2 --burst 5 3 1
ossim-cpu priority --burst 10 1 2 --priority 3 1 2
ossim-cpu rr --burst 5 3 1 --slice 2

ossim-pages --frames 3 lru 7 0 1 2 0 3 0 4     # algorithm: fifo, lru or lfu

ossim-disk fcfs --head 53 98 183 37 122
ossim-disk scan --disk-size 200 --head 53 --direction low 98 183 37 122
ossim-disk cscan --disk-size 200 --head 53 98 183 37 122

ossim-memory --blocks 100 500 200 300 600 --records 212 417 112 426

ossim-bankers --allocation "0 1 0" --allocation "2 0 0" \
              --maximum "7 5 3" --maximum "3 2 2" --available 3 3 2

ossim-semaphore --capacity 3
```

`ossim-cpu` prints a Gantt chart, a per-process table and the totals and
averages. `ossim-pages` prints the frames after each reference and the
number of page faults. `ossim-memory` runs all three strategies over the same
input. `ossim-bankers` takes one `--allocation` and one `--maximum` per
process (values separated by spaces or commas) and prints the need matrix,
the finishing sequence and whether the system is safe. `ossim-semaphore`
reads one choice per line from standard input: `1` produces, `2` consumes,
`3` exits.

## What it does not do

The commands do not prompt for input; everything is given on the command
line (or, for `ossim-semaphore`, on standard input). CPU scheduling is
non-preemptive apart from round robin, and priority and round-robin
scheduling take no arrival times. The disk functions report only the total
head movement, not the order in which requests are served.