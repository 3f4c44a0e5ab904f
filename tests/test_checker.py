import io

import pytest

from wirestack.pushswap.checker import (
    CommandError,
    check,
    load_stack,
    main,
    parse_command,
    read_commands,
)
from wirestack.pushswap.parsing import ArgumentError
from wirestack.pushswap.solver import solve
from wirestack.pushswap.stacks import Command


@pytest.mark.parametrize("name", [c.value for c in Command])
def test_parse_command_accepts_every_instruction(name):
    assert parse_command(name + "\n") == Command(name)


@pytest.mark.parametrize("line", ["sa", "\n", " sa\n", "sax\n", "rraa\n", "SA\n", "rr a\n"])
def test_parse_command_rejects_bad_lines(line):
    with pytest.raises(CommandError):
        parse_command(line)


def test_read_commands_in_order():
    stream = io.StringIO("pb\nrra\npa\n")
    assert list(read_commands(stream)) == [Command.PB, Command.RRA, Command.PA]


def test_read_commands_rejects_missing_final_newline():
    with pytest.raises(CommandError):
        list(read_commands(io.StringIO("pb\npa")))


def test_load_stack_values_in_order():
    stacks = load_stack(["3", "-1", "7"])
    assert list(stacks.a) == [3, -1, 7]
    assert list(stacks.b) == []


@pytest.mark.parametrize("args", [["3", "3"], ["1", "x"], [""], ["2147483648"]])
def test_load_stack_rejects_invalid(args):
    with pytest.raises(ArgumentError):
        load_stack(args)


def test_check_simple_cases():
    assert check([2, 1], [Command.SA]) is True
    assert check([3, 2, 1], []) is False
    assert check([1, 2, 3], []) is True


def test_check_fails_when_b_not_empty():
    assert check([1, 2, 3], [Command.PB]) is False


@pytest.mark.parametrize(
    "values",
    [[5, 3, 1, 4, 2], [2, 1, 3], [10, -4, 7, 0, 3, 8, -9, 1], list(range(30, 0, -1))],
)
def test_solver_output_passes_check(values):
    assert check(values, solve(values)) is True


def test_main_without_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_bad_argument(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["1", "a"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_ok(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nxx\n"))
    assert main(["2", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""