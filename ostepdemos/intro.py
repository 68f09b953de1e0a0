"""Introductory demos: CPU, memory, I/O, threads and address space."""

import inspect
import itertools
import os
import sys
import threading
from typing import Callable, Dict, Iterable, Optional, Sequence, TextIO, Tuple

from .common import spin
from .lottery import _atoi

DEFAULT_IO_PATH = "/tmp/file"
_HEAP_BYTES = 100_000_000
_USAGE = "usage: intro cpu <string> | io | mem <value> | threads <loops> | va"


def _rounds(iterations: Optional[int]) -> Iterable[int]:
    return itertools.count() if iterations is None else range(iterations)


def cpu_loop(text: str, out: Optional[TextIO] = None,
             iterations: Optional[int] = None) -> None:
    """Print text, then busy-wait a second; forever unless iterations is given."""
    for _ in _rounds(iterations):
        print(text, file=out, flush=True)
        spin(1)


def write_hello(path: "str | os.PathLike[str]" = DEFAULT_IO_PATH) -> int:
    """Write a greeting to path, force it to disk and return the bytes written."""
    data = b"hello world\n"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        written = os.write(fd, data)
        if written != len(data):
            raise OSError(f"short write: {written} of {len(data)} bytes")
        os.fsync(fd)
    finally:
        os.close(fd)
    return written


def mem_loop(value: int, out: Optional[TextIO] = None,
             iterations: Optional[int] = None) -> int:
    """Store value in a heap cell and increment it once a second; return the last value."""
    pid = os.getpid()
    cell = [0]
    print(f"({pid}) addr pointed to by p: {id(cell):#x}", file=out, flush=True)
    cell[0] = value
    for _ in _rounds(iterations):
        spin(1)
        cell[0] += 1
        print(f"({pid}) value of p: {cell[0]}", file=out, flush=True)
    return cell[0]


def threaded_count(loops: int, out: Optional[TextIO] = None) -> int:
    """Let two threads bump an unprotected shared counter; return its final value."""
    counter = 0

    def worker() -> None:
        nonlocal counter
        for _ in range(loops):
            counter += 1

    print(f"Initial value : {counter}", file=out)
    workers = [threading.Thread(target=worker) for _ in range(2)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    print(f"Final value   : {counter}", file=out)
    return counter


def memory_layout(out: Optional[TextIO] = None) -> Dict[str, int]:
    """Print and return addresses of code, a large heap block and the current frame."""
    block = bytearray(_HEAP_BYTES)
    frame = inspect.currentframe()
    addresses = {
        "code": id(memory_layout.__code__),
        "heap": id(block),
        "stack": id(frame),
    }
    del frame
    for label, key in (("code ", "code"), ("heap ", "heap"), ("stack", "stack")):
        print(f"location of {label}: {addresses[key]:#x}", file=out)
    return addresses


_NO_ARGUMENT: Dict[str, Callable[[], object]] = {
    "io": write_hello,
    "va": memory_layout,
}

_ONE_ARGUMENT: Dict[str, Tuple[str, Callable[[str], object]]] = {
    "cpu": ("usage: cpu <string>", cpu_loop),
    "mem": ("usage: mem <value>", lambda value: mem_loop(_atoi(value))),
    "threads": ("usage: threads <loops>", lambda loops: threaded_count(_atoi(loops))),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    name, rest = (args[0], args[1:]) if args else ("", [])
    if name in _NO_ARGUMENT:
        _NO_ARGUMENT[name]()
        return 0
    if name not in _ONE_ARGUMENT:
        print(_USAGE, file=sys.stderr)
        return 1
    usage, command = _ONE_ARGUMENT[name]
    if len(rest) != 1:
        print(usage, file=sys.stderr)
        return 1
    command(rest[0])
    return 0