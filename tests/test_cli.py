import io
import sys

import pytest

from pushswap.cli import checker_main, main, run_instructions
from pushswap.stacks import Stacks


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_main_prints_single_swap(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_without_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_rejects_bad_separate_arguments(capsys):
    assert main(["1", "a"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_rejects_duplicates(capsys):
    assert main(["4", "4"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_bad_single_argument_reports_and_exits_cleanly(capsys):
    assert main(["1 x 2"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_output_sorts_the_input(capsys):
    numbers = ["9", "-4", "17", "0", "3", "-11", "6"]
    assert main(numbers) == 0
    lines = capsys.readouterr().out.splitlines(keepends=True)
    stacks = Stacks([int(n) for n in numbers], record=False)
    assert run_instructions(stacks, lines) == []
    assert stacks.is_solved()


def test_run_instructions_applies_and_rejects():
    stacks = Stacks([2, 1], record=False)
    rejected = run_instructions(stacks, ["sa\n", "bogus\n", "sa"])
    assert rejected == ["bogus\n", "sa"]
    assert list(stacks.a) == [1, 2]


def test_run_instructions_push_and_back():
    stacks = Stacks([3, 1, 2], record=False)
    assert run_instructions(stacks, ["pb\n", "ra\n", "pa\n"]) == []
    assert list(stacks.a) == [3, 2, 1]
    assert not stacks.b


def test_checker_accepts_correct_instructions(monkeypatch, capsys):
    _feed(monkeypatch, "sa\n")
    assert checker_main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_checker_reports_unsorted(monkeypatch, capsys):
    _feed(monkeypatch, "")
    assert checker_main(["2", "1"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_checker_reports_nonempty_b(monkeypatch, capsys):
    _feed(monkeypatch, "pb\n")
    assert checker_main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


@pytest.mark.parametrize("text", ["xx\n", "sa"])
def test_checker_flags_bad_instruction(monkeypatch, capsys, text):
    _feed(monkeypatch, text)
    assert checker_main(["1", "2"]) == 0
    assert capsys.readouterr().out == "Error\nOK\n"


def test_checker_rejects_bad_arguments(monkeypatch, capsys):
    _feed(monkeypatch, "sa\n")
    assert checker_main(["1", "+2"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_checker_without_arguments_reads_nothing(monkeypatch, capsys):
    _feed(monkeypatch, "sa\n")
    assert checker_main([]) == 0
    assert capsys.readouterr().out == ""
    assert sys.stdin.read() == "sa\n"


def test_checker_accepts_sorter_output(monkeypatch, capsys):
    numbers = ["5", "2", "8", "-1", "3", "7"]
    main(numbers)
    instructions = capsys.readouterr().out
    _feed(monkeypatch, instructions)
    assert checker_main(numbers) == 0
    assert capsys.readouterr().out == "OK\n"