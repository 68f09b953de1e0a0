import os
import re
import stat
import time

import pytest

from ostepdemos.intro import (
    cpu_loop,
    main,
    mem_loop,
    memory_layout,
    threaded_count,
    write_hello,
)


@pytest.mark.parametrize("iterations, printed, min_elapsed", [(0, "", 0.0), (1, "A\n", 0.99)])
def test_cpu_loop_prints_then_spins(capsys, iterations, printed, min_elapsed):
    start = time.monotonic()
    cpu_loop("A", None, iterations)
    assert time.monotonic() - start >= min_elapsed
    assert capsys.readouterr().out == printed


@pytest.mark.parametrize("start, iterations, final", [(5, 1, 6), (42, 0, 42)])
def test_mem_loop_increments_value(capsys, start, iterations, final):
    assert mem_loop(start, None, iterations) == final
    lines = capsys.readouterr().out.splitlines()
    pid = os.getpid()
    assert re.fullmatch(rf"\({pid}\) addr pointed to by p: 0x[0-9a-f]+", lines[0])
    assert lines[1:] == [f"({pid}) value of p: {v}" for v in range(start + 1, final + 1)]


def test_threaded_count_zero_loops(capsys):
    assert threaded_count(0) == 0
    assert capsys.readouterr().out == "Initial value : 0\nFinal value   : 0\n"


def test_threaded_count_is_bounded(capsys):
    result = threaded_count(1000)
    assert 1 <= result <= 2000
    assert capsys.readouterr().out.splitlines()[-1] == f"Final value   : {result}"


def test_memory_layout_reports_three_addresses(capsys):
    addresses = memory_layout()
    assert set(addresses) == {"code", "heap", "stack"}
    assert capsys.readouterr().out.splitlines() == [
        f"location of code : {addresses['code']:#x}",
        f"location of heap : {addresses['heap']:#x}",
        f"location of stack: {addresses['stack']:#x}",
    ]


def test_main_threads_command(capsys):
    assert main(["threads", "3"]) == 0
    assert capsys.readouterr().out.startswith("Initial value : 0\n")


@pytest.mark.parametrize(
    "argv, message",
    [(["mem"], "usage: mem <value>"), ([], "usage: intro"), (["bogus"], "usage: intro")],
)
def test_main_usage_errors(capsys, argv, message):
    assert main(argv) == 1
    assert message in capsys.readouterr().err