"""Runnable demonstrations of operating-system concepts: processes, scheduling, threads, concurrency bugs, persistence and UDP."""

__version__ = "0.1.0"