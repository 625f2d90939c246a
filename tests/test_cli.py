import random

import pytest

from pushswap.cli import ABORT_STATUS, main
from pushswap.stacks import Stack


def _replay(values, lines):
    a, b = Stack(values), Stack()
    actions = {
        "sa": a.swap,
        "ra": a.rotate,
        "rra": a.reverse_rotate,
        "rb": b.rotate,
        "rrb": b.reverse_rotate,
        "pa": lambda: b.push_to(a),
        "pb": lambda: a.push_to(b),
    }
    for line in lines:
        actions[line]()
    return list(a), list(b)


def test_two_numbers(capsys):
    status = main(["2", "1"])
    captured = capsys.readouterr()
    assert captured.out == "ra\n"
    assert captured.err == ""
    assert status == ABORT_STATUS


@pytest.mark.parametrize("args", [["1", "x"], ["1", "1"], ["2147483648", "1"], ["-2147483648"], ["+"]])
def test_invalid_input_prints_error(capsys, args):
    status = main(args)
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""
    assert status == ABORT_STATUS


@pytest.mark.parametrize("args", [[], ["7"], ["1", "2", "3"]])
def test_nothing_to_sort_prints_nothing(capsys, args):
    status = main(args)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert status == ABORT_STATUS


def test_five_numbers_are_sorted(capsys):
    values = [3, -7, 12, 0, 5]
    status = main([str(v) for v in values])
    lines = capsys.readouterr().out.splitlines()
    a, b = _replay(values, lines)
    assert a == sorted(values)
    assert b == []
    assert status == ABORT_STATUS


def test_large_input_is_sorted_with_success_status(capsys):
    values = random.Random(3).sample(range(-500, 500), 40)
    status = main([str(v) for v in values])
    lines = capsys.readouterr().out.splitlines()
    a, b = _replay(values, lines)
    assert a == sorted(values)
    assert b == []
    assert status == 0


def test_signed_arguments_are_accepted(capsys):
    values = [5, -3, 8, 1, 0, 4, -9]
    args = ["+5", "-3", "+8", "1", "0", "4", "-9"]
    status = main(args)
    lines = capsys.readouterr().out.splitlines()
    a, _ = _replay(values, lines)
    assert a == sorted(values)
    assert status == 0