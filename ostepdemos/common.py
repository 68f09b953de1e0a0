"""Wall-clock time and busy-waiting helpers."""

import time


def get_time() -> float:
    """Return the current wall-clock time in seconds."""
    return time.time()


def spin(seconds: float) -> None:
    """Busy-wait, doing nothing, for the given number of seconds."""
    start = get_time()
    while get_time() - start < seconds:
        pass