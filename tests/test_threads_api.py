import pytest

from ostepdemos.threads_api import (
    create_simple_args,
    create_with_args,
    create_with_return,
    main,
)


@pytest.mark.parametrize(
    "call, expected, lines",
    [
        (lambda: create_with_args(10, 20), None, ["10 20", "done"]),
        (lambda: create_simple_args(100), 101, ["100", "returned 101"]),
        (lambda: create_simple_args(-5), -4, ["-5", "returned -4"]),
        (lambda: create_with_return(10, 20), (1, 2), ["args 10 20", "returned 1 2"]),
    ],
)
def test_demo_output_and_result(capsys, call, expected, lines):
    assert call() == expected
    assert capsys.readouterr().out.splitlines() == lines


def test_main_runs_named_demo(capsys):
    assert main(["simple"]) == 0
    assert capsys.readouterr().out.splitlines() == ["100", "returned 101"]


@pytest.mark.parametrize("argv", [["nothing"], [], ["simple", "extra"]])
def test_main_rejects_bad_arguments(capsys, argv):
    assert main(argv) == 1
    assert "usage" in capsys.readouterr().err