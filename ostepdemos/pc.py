"""Producer and consumers sharing a bounded buffer guarded by condition variables."""

import re
import sys
import threading
from collections import deque
from typing import Deque, List, Optional, Sequence

END_OF_PRODUCTION = -1
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_USAGE = "usage: pc [--single-cv] <buffersize> <loops> <consumers>"


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class BoundedBuffer:
    """A fixed-capacity FIFO shared between threads.

    With single_cv, producers and consumers wait on one condition variable;
    otherwise each side has its own.
    """

    def __init__(self, size: int, single_cv: bool = False) -> None:
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        self.size = size
        self._items: Deque[int] = deque()
        self._lock = threading.Lock()
        self._fill = threading.Condition(self._lock)
        self._empty = self._fill if single_cv else threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def put(self, value: int) -> None:
        """Wait for a free slot, then append value."""
        with self._lock:
            while len(self._items) == self.size:
                self._empty.wait()
            self._items.append(value)
            self._fill.notify()

    def get(self) -> int:
        """Wait for an item, then remove and return the oldest one."""
        with self._lock:
            while not self._items:
                self._fill.wait()
            value = self._items.popleft()
            self._empty.notify()
            return value


def run(buffer_size: int, loops: int, consumers: int = 1,
        single_cv: bool = False) -> List[List[int]]:
    """Produce 0..loops-1 plus one end marker per consumer.

    Returns, for each consumer, the values it took (end marker excluded).
    """
    if consumers < 0:
        raise ValueError(f"number of consumers must not be negative, got {consumers}")
    buffer = BoundedBuffer(buffer_size, single_cv)
    taken: List[List[int]] = [[] for _ in range(consumers)]

    def producer() -> None:
        for value in range(loops):
            buffer.put(value)
        for _ in range(consumers):
            buffer.put(END_OF_PRODUCTION)

    def consumer(received: List[int]) -> None:
        while (value := buffer.get()) != END_OF_PRODUCTION:
            received.append(value)

    threads = [threading.Thread(target=producer)]
    threads += [threading.Thread(target=consumer, args=(received,)) for received in taken]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return taken


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    single_cv = "--single-cv" in args
    args = [arg for arg in args if arg != "--single-cv"]
    if len(args) != 3:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        run(_atoi(args[0]), _atoi(args[1]), _atoi(args[2]), single_cv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0