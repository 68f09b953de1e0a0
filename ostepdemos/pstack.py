"""A stack of integers that persists in a memory-mapped file."""

import mmap
import os
import re
import struct
import sys
from typing import Iterable, Optional, Sequence, TextIO

_HEADER = struct.Struct("=Q")
_ITEM = struct.Struct("=i")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
DEFAULT_IMAGE = "ps.img"


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _wrap32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


class PersistentStack:
    """Integer stack backed by a file: an item count followed by the items."""

    def __init__(self, path: "str | os.PathLike[str]") -> None:
        self._file = open(path, "r+b")
        try:
            size = os.fstat(self._file.fileno()).st_size
            if size < _HEADER.size or size % _ITEM.size:
                raise ValueError(
                    f"backing file size {size} must be at least {_HEADER.size} "
                    f"bytes and a multiple of {_ITEM.size}"
                )
            self._map = mmap.mmap(self._file.fileno(), size)
        except BaseException:
            self._file.close()
            raise
        self._size = size

    @property
    def capacity(self) -> int:
        return (self._size - _HEADER.size) // _ITEM.size

    def __len__(self) -> int:
        (count,) = _HEADER.unpack_from(self._map, 0)
        return count

    def push(self, value: int) -> None:
        """Push a value; raise OverflowError if the file is full."""
        count = len(self)
        if _HEADER.size + (count + 1) * _ITEM.size > self._size:
            raise OverflowError("stack is full")
        _ITEM.pack_into(self._map, _HEADER.size + count * _ITEM.size, _wrap32(value))
        _HEADER.pack_into(self._map, 0, count + 1)

    def pop(self) -> int:
        """Pop and return the top value; raise IndexError if empty."""
        count = len(self)
        if count == 0:
            raise IndexError("pop from empty stack")
        count -= 1
        (value,) = _ITEM.unpack_from(self._map, _HEADER.size + count * _ITEM.size)
        _HEADER.pack_into(self._map, 0, count)
        return value

    def close(self) -> None:
        if not self._map.closed:
            self._map.flush()
            self._map.close()
        self._file.close()

    def __enter__(self) -> "PersistentStack":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def run(path: "str | os.PathLike[str]", commands: Iterable[str],
        out: Optional[TextIO] = None) -> None:
    """Apply push and pop commands, printing each popped value."""
    out = out if out is not None else sys.stdout
    with PersistentStack(path) as stack:
        for command in commands:
            if command == "pop":
                try:
                    print(stack.pop(), file=out)
                except IndexError:
                    pass
            else:
                try:
                    stack.push(_atoi(command))
                except OverflowError:
                    pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    run(DEFAULT_IMAGE, args, sys.stdout)
    return 0