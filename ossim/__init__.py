"""Simulators for classic operating-system algorithms: CPU scheduling, page
replacement, disk scheduling, memory allocation, the banker's algorithm and a
semaphore-guarded producer/consumer buffer."""

__version__ = "0.1.0"