"""Process creation with fork, wait and exec."""

import os
import sys
import time
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple

_USAGE = "usage: cpu_api p1 | p2 | p3 [file] | p4 [file [output]]"


def _hello(out: Optional[TextIO]) -> None:
    print(f"hello world (pid:{os.getpid()})", file=out, flush=True)


def _child_hello(out: Optional[TextIO]) -> None:
    print(f"hello, I am child (pid:{os.getpid()})", file=out, flush=True)


def _fork(child_body: Callable[[], None]) -> int:
    """Fork; the child runs child_body and exits, the parent gets the child's pid."""
    sys.stdout.flush()
    rc = os.fork()
    if rc == 0:
        status = 1
        try:
            child_body()
            status = 0
        finally:
            os._exit(status)
    return rc


def _reap(rc: int, out: Optional[TextIO]) -> int:
    wc, _ = os.waitpid(rc, 0)
    print(f"hello, I am parent of {rc} (wc:{wc}) (pid:{os.getpid()})", file=out)
    return wc


def fork_demo(out: Optional[TextIO] = None) -> int:
    """Fork once; both processes greet. Returns the child's pid to the parent."""
    _hello(out)
    rc = _fork(lambda: _child_hello(out))
    print(f"hello, I am parent of {rc} (pid:{os.getpid()})", file=out)
    return rc


def fork_wait_demo(out: Optional[TextIO] = None) -> int:
    """Fork, let the parent wait for the child; return the reaped pid."""
    def child() -> None:
        _child_hello(out)
        time.sleep(1)

    _hello(out)
    return _reap(_fork(child), out)


def fork_exec_demo(path: "str | os.PathLike[str]" = "p3.c",
                   out: Optional[TextIO] = None) -> int:
    """Fork a child that runs wc on path; the parent waits and returns its pid."""
    def child() -> None:
        _child_hello(out)
        sys.stdout.flush()
        try:
            os.execvp("wc", ["wc", os.fspath(path)])
        except OSError:
            print("this shouldn't print out", end="", file=out, flush=True)

    _hello(out)
    return _reap(_fork(child), out)


def fork_redirect_demo(path: "str | os.PathLike[str]" = "p4.c",
                       output_path: "str | os.PathLike[str]" = "./p4.output") -> int:
    """Fork a child whose standard output goes to output_path, then run wc on path."""
    def child() -> None:
        fd = os.open(output_path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o700)
        if fd != 1:
            os.dup2(fd, 1)
            os.close(fd)
        try:
            os.execvp("wc", ["wc", os.fspath(path)])
        except OSError:
            pass

    wc, _ = os.waitpid(_fork(child), 0)
    return wc


_DEMOS: Dict[str, Tuple[Callable[[List[str]], object], int]] = {
    "p1": (lambda rest: fork_demo(), 0),
    "p2": (lambda rest: fork_wait_demo(), 0),
    "p3": (lambda rest: fork_exec_demo(*rest), 1),
    "p4": (lambda rest: fork_redirect_demo(*rest), 2),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    demo = _DEMOS.get(args[0]) if args else None
    if demo is None or len(args) - 1 > demo[1]:
        print(_USAGE, file=sys.stderr)
        return 1
    run_demo, _ = demo
    try:
        run_demo(args[1:])
    except OSError:
        print("fork failed", file=sys.stderr)
        return 1
    return 0