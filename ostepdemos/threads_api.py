"""Creating threads, passing them arguments and collecting their results."""

import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, NamedTuple, Optional, Sequence, TextIO, Tuple, TypeVar

_T = TypeVar("_T")
_USAGE = "usage: threads_api create | simple | return"


class _Args(NamedTuple):
    a: int
    b: int


def _run_in_thread(fn: Callable[..., _T], *args) -> _T:
    with ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(fn, *args).result()


def create_with_args(a: int, b: int, out: Optional[TextIO] = None) -> None:
    """Start a thread that prints the two values it was handed, then wait for it."""
    def worker(args: _Args) -> None:
        print(f"{args.a} {args.b}", file=out, flush=True)

    _run_in_thread(worker, _Args(a, b))
    print("done", file=out, flush=True)


def create_simple_args(value: int, out: Optional[TextIO] = None) -> int:
    """Hand a thread a single value; it prints it and returns value + 1."""
    def worker(arg: int) -> int:
        print(arg, file=out, flush=True)
        return arg + 1

    result = _run_in_thread(worker, value)
    print(f"returned {result}", file=out, flush=True)
    return result


def create_with_return(a: int, b: int, out: Optional[TextIO] = None) -> Tuple[int, int]:
    """Hand a thread two values; it prints them and returns the pair (1, 2)."""
    def worker(args: _Args) -> Tuple[int, int]:
        print(f"args {args.a} {args.b}", file=out, flush=True)
        return 1, 2

    x, y = _run_in_thread(worker, _Args(a, b))
    print(f"returned {x} {y}", file=out, flush=True)
    return x, y


_DEMOS: Dict[str, Callable[[], object]] = {
    "create": lambda: create_with_args(10, 20),
    "simple": lambda: create_simple_args(100),
    "return": lambda: create_with_return(10, 20),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    demo = _DEMOS.get(args[0]) if len(args) == 1 else None
    if demo is None:
        print(_USAGE, file=sys.stderr)
        return 1
    demo()
    return 0