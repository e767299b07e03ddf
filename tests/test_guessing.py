import io
import random

import pytest

from learnbits.guessing import PROMPT, Puzzle, main, new_puzzle, play_game


@pytest.mark.parametrize("seed", range(25))
def test_new_puzzle_numbers_in_range(seed):
    puzzle = new_puzzle(random.Random(seed))
    for value in (puzzle.first_number, puzzle.second_number, puzzle.subtraction):
        assert 2 <= value <= 10


def test_new_puzzle_is_reproducible():
    first = new_puzzle(random.Random(7))
    second = new_puzzle(random.Random(7))
    assert first.first_number == second.first_number
    assert first.second_number == second.second_number
    assert first.subtraction == second.subtraction
    assert first.answer == second.answer


@pytest.mark.parametrize("seed", range(5))
def test_trick_works_for_every_starting_number(seed):
    puzzle = new_puzzle(random.Random(seed))
    for start in range(1, 11):
        value = start * puzzle.first_number * puzzle.second_number
        value //= start
        assert value - puzzle.subtraction == puzzle.answer


def test_answer_value():
    assert Puzzle(3, 4, 5).answer == 7


def test_play_game_output_and_input_consumption():
    puzzle = Puzzle(3, 4, 5)
    stdin = io.StringIO("\n\n\n\n\nleftover\n")
    stdout = io.StringIO()
    play_game(puzzle, stdin, stdout)
    lines = stdout.getvalue().splitlines()
    assert lines[:3] == ["Guess the Number Game", "---------------------", ""]
    assert lines[3] == f"Think of a number between 1 and 10 {PROMPT}"
    assert lines[4] == f"Multiply your number by 3 {PROMPT}"
    assert lines[5] == f"Multiply the result by 4 {PROMPT}"
    assert lines[7] == f"Now subtract 5 {PROMPT}"
    assert lines[-1] == f"The answer is {puzzle.answer}"
    assert stdin.read() == "leftover\n"


def test_play_game_survives_end_of_input():
    stdout = io.StringIO()
    play_game(Puzzle(2, 2, 2), io.StringIO(""), stdout)
    assert stdout.getvalue().endswith("The answer is 2\n")
    assert len(stdout.getvalue().splitlines()) == 9


def test_main_plays_a_round(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n" * 5))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Guess the Number Game\n")
    assert out.count(PROMPT) == 5