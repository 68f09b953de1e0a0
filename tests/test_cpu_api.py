import os

import pytest

from ostepdemos.cpu_api import (
    fork_demo,
    fork_exec_demo,
    fork_redirect_demo,
    fork_wait_demo,
    main,
)

SAMPLE = "a b\nc\n"
COUNTS = ["2", "3", "6"]


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE)
    return path


def _lines(path):
    return path.read_text().splitlines()


def test_fork_demo_prints_from_both_processes(tmp_path):
    log = tmp_path / "log.txt"
    with open(log, "a") as out:
        pid = fork_demo(out)
        out.flush()
        _, status = os.waitpid(pid, 0)
    me = os.getpid()
    lines = _lines(log)
    assert status == 0
    assert lines[0] == f"hello world (pid:{me})"
    assert sorted(lines[1:]) == sorted([
        f"hello, I am child (pid:{pid})",
        f"hello, I am parent of {pid} (pid:{me})",
    ])


def test_fork_wait_demo_parent_prints_last(tmp_path):
    log = tmp_path / "log.txt"
    with open(log, "a") as out:
        wc = fork_wait_demo(out)
    me = os.getpid()
    assert _lines(log) == [
        f"hello world (pid:{me})",
        f"hello, I am child (pid:{wc})",
        f"hello, I am parent of {wc} (wc:{wc}) (pid:{me})",
    ]


def test_fork_exec_demo_runs_wc(tmp_path, sample, capfd):
    log = tmp_path / "log.txt"
    with open(log, "a") as out:
        wc = fork_exec_demo(sample, out)
    lines = _lines(log)
    assert lines[1] == f"hello, I am child (pid:{wc})"
    assert lines[-1].startswith(f"hello, I am parent of {wc} (wc:{wc})")
    assert capfd.readouterr().out.split() == COUNTS + [str(sample)]


def test_fork_redirect_demo_writes_wc_output_to_file(tmp_path, sample):
    output = tmp_path / "p4.output"
    output.write_text("stale contents that must be truncated\n" * 5)
    wc = fork_redirect_demo(sample, output)
    assert wc > 0
    assert output.read_text().split() == COUNTS + [str(sample)]


def test_main_rejects_unknown_demo(capsys):
    assert main(["p9"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_without_arguments_fails():
    assert main([]) == 1