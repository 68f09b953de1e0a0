"""Two threads running at once, and a shared counter they race on."""

import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence, TextIO

from .lottery import _atoi

_USAGE = "usage: threads_intro t0 | t1 <loopcount>"


class _Counter:
    def __init__(self) -> None:
        self.value = 0


def _together(worker: Callable[[str], None], letters: str = "AB") -> None:
    """Run worker once per letter, all at the same time, and wait for every one."""
    with ThreadPoolExecutor(max_workers=len(letters)) as pool:
        list(pool.map(worker, letters))


def two_threads(out: Optional[TextIO] = None) -> None:
    """Start two threads that each print their letter, then wait for both."""
    print("main: begin", file=out, flush=True)
    _together(lambda letter: print(letter, file=out, flush=True))
    print("main: end", file=out, flush=True)


def shared_counter(loops: int, out: Optional[TextIO] = None) -> int:
    """Two threads each add one to a shared counter loops times; return the total."""
    counter = _Counter()

    def worker(letter: str) -> None:
        private = object()
        print(f"{letter}: begin [addr of i: {id(private):#x}]", file=out, flush=True)
        for _ in range(loops):
            counter.value = counter.value + 1
        print(f"{letter}: done", file=out, flush=True)

    print(f"main: begin [counter = {counter.value}] [{id(counter):x}]", file=out, flush=True)
    _together(worker)
    print(f"main: done\n [counter: {counter.value}]\n [should: {loops * 2}]",
          file=out, flush=True)
    return counter.value


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    name, rest = (args[0], args[1:]) if args else ("", [])
    if name == "t0" and not rest:
        two_threads()
    elif name == "t1" and len(rest) == 1:
        shared_counter(_atoi(rest[0]))
    else:
        usage = {"t0": "usage: main", "t1": "usage: main-first <loopcount>"}
        print(usage.get(name, _USAGE), file=sys.stderr)
        return 1
    return 0