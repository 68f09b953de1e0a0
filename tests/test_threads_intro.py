import pytest

from ostepdemos.threads_intro import main, shared_counter, two_threads


def test_two_threads_prints_both_letters_between_begin_and_end(capsys):
    two_threads()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "main: begin"
    assert lines[-1] == "main: end"
    assert sorted(lines[1:-1]) == ["A", "B"]


def test_shared_counter_total_is_bounded_and_reported(capsys):
    result = shared_counter(1000)
    assert 0 < result <= 2000
    lines = capsys.readouterr().out.splitlines()
    assert f" [counter: {result}]" in lines
    assert " [should: 2000]" in lines


def test_shared_counter_with_no_loops_stays_zero(capsys):
    assert shared_counter(0) == 0
    assert capsys.readouterr().out.startswith("main: begin [counter = 0]")


def test_shared_counter_threads_begin_and_finish(capsys):
    shared_counter(10)
    text = capsys.readouterr().out
    assert "A: done" in text and "B: done" in text
    assert text.count("addr of i: 0x") == 2


@pytest.mark.parametrize(
    "argv, message",
    [(["t1"], "loopcount"), (["t0", "x"], "usage: main"), (["zz"], "usage: threads_intro")],
)
def test_main_usage_errors(capsys, argv, message):
    assert main(argv) == 1
    assert message in capsys.readouterr().err


def test_main_t0_runs(capsys):
    assert main(["t0"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "main: end"