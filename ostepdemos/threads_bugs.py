"""Classic concurrency bugs: atomicity and ordering violations, and deadlock."""

import contextlib
import sys
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

PR_STATE_INIT = 0
_T2_ATOMICITY = " " * 17
_T2_DEADLOCK = " " * 27
_USAGE = "usage: threads_bugs atomicity | atomicity_fixed | deadlock | ordering | ordering_fixed"


def _say(out: TextIO, text: str) -> None:
    out.write(text + "\n")
    out.flush()


@dataclass
class _Proc:
    pid: int


@dataclass
class _ThreadInfo:
    proc_info: Optional[_Proc]


def atomicity(fixed: bool = False, out: Optional[TextIO] = None,
              clear_delay: float = 1.0, use_delay: float = 2.0) -> Optional[int]:
    """One thread checks then uses a shared record while another clears it.

    Returns the pid the first thread used, or None if it found the record
    already cleared. Raises RuntimeError if the record vanished between the
    check and the use.
    """
    out = out if out is not None else sys.stdout
    info = _ThreadInfo(_Proc(pid=100))
    guard = threading.Lock() if fixed else contextlib.nullcontext()
    used: List[int] = []
    errors: List[str] = []

    def thread1() -> None:
        _say(out, "t1: before check")
        with guard:
            if info.proc_info is not None:
                _say(out, "t1: after check")
                time.sleep(use_delay)
                _say(out, "t1: use!")
                try:
                    pid = info.proc_info.pid
                except AttributeError:
                    errors.append("t1: proc_info was cleared between check and use")
                    return
                _say(out, str(pid))
                used.append(pid)

    def thread2() -> None:
        _say(out, f"{_T2_ATOMICITY}t2: begin")
        time.sleep(clear_delay)
        with guard:
            _say(out, f"{_T2_ATOMICITY}t2: set to NULL")
            info.proc_info = None

    _say(out, "main: begin")
    threads = [threading.Thread(target=thread1), threading.Thread(target=thread2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise RuntimeError(errors[0])
    _say(out, "main: end")
    return used[0] if used else None


def deadlock(out: Optional[TextIO] = None, timeout: Optional[float] = None) -> bool:
    """Two threads take two locks in opposite orders.

    With a timeout, a thread that cannot get its second lock in time gives up.
    Returns True if both threads got both locks.
    """
    out = out if out is not None else sys.stdout
    locks = {"L1": threading.Lock(), "L2": threading.Lock()}
    wait = -1 if timeout is None else timeout
    finished: List[str] = []

    def worker(name: str, indent: str, first: str, second: str) -> None:
        _say(out, f"{indent}{name}: begin")
        _say(out, f"{indent}{name}: try to acquire {first}...")
        with locks[first]:
            _say(out, f"{indent}{name}: {first} acquired")
            _say(out, f"{indent}{name}: try to acquire {second}...")
            if not locks[second].acquire(timeout=wait):
                _say(out, f"{indent}{name}: gave up waiting for {second}")
                return
            try:
                _say(out, f"{indent}{name}: {second} acquired")
            finally:
                locks[second].release()
        finished.append(name)

    _say(out, "main: begin")
    threads = [
        threading.Thread(target=worker, args=("t1", "", "L1", "L2")),
        threading.Thread(target=worker, args=("t2", _T2_DEADLOCK, "L2", "L1")),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    _say(out, "main: end")
    return len(finished) == len(threads)


@dataclass
class _PRThread:
    thread: threading.Thread
    state: int = PR_STATE_INIT


class _Shared:
    def __init__(self) -> None:
        self.m_thread: Optional[_PRThread] = None
        self.initialised = False
        self.cond = threading.Condition()


def _create_thread(target, delay: float) -> _PRThread:
    thread = threading.Thread(target=target)
    record = _PRThread(thread)
    thread.start()
    time.sleep(delay)
    return record


def ordering(fixed: bool = False, out: Optional[TextIO] = None,
             create_delay: float = 1.0) -> int:
    """A thread reads the record describing itself before its creator has stored it.

    Returns the state the thread read; raises RuntimeError if the record was
    not yet there.
    """
    out = out if out is not None else sys.stdout
    shared = _Shared()
    states: List[int] = []
    errors: List[str] = []

    def m_main() -> None:
        _say(out, "mMain: begin")
        if fixed:
            with shared.cond:
                shared.cond.wait_for(lambda: shared.initialised)
        record = shared.m_thread
        if record is None:
            errors.append("mMain: thread record used before it was initialised")
            return
        states.append(record.state)
        _say(out, f"mMain: state is {record.state}")

    _say(out, "ordering: begin")
    shared.m_thread = _create_thread(m_main, create_delay)
    if fixed:
        with shared.cond:
            shared.initialised = True
            shared.cond.notify()
    shared.m_thread.thread.join()
    if errors:
        raise RuntimeError(errors[0])
    _say(out, "ordering: end")
    return states[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(_USAGE, file=sys.stderr)
        return 1
    name = args[0]
    try:
        if name == "atomicity":
            atomicity(False, sys.stdout)
        elif name == "atomicity_fixed":
            atomicity(True, sys.stdout)
        elif name == "deadlock":
            deadlock(sys.stdout)
        elif name == "ordering":
            ordering(False, sys.stdout)
        elif name == "ordering_fixed":
            ordering(True, sys.stdout)
        else:
            print(_USAGE, file=sys.stderr)
            return 1
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0