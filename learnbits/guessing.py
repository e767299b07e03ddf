"""A 'think of a number' trick game."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import TextIO

PROMPT = "and don't type your number, just press ENTER when ready."


@dataclass(frozen=True)
class Puzzle:
    """The numbers used to lead the player to a known answer."""

    first_number: int
    second_number: int
    subtraction: int

    @property
    def answer(self) -> int:
        return self.first_number * self.second_number - self.subtraction


def new_puzzle(rng: random.Random | None = None) -> Puzzle:
    """Pick three numbers between 2 and 10 inclusive."""
    source = rng if rng is not None else random.Random()
    return Puzzle(
        first_number=source.randrange(9) + 2,
        second_number=source.randrange(9) + 2,
        subtraction=source.randrange(9) + 2,
    )


def play_game(puzzle: Puzzle, stdin: TextIO, stdout: TextIO) -> None:
    """Lead the player through the steps, waiting for ENTER after each."""
    print("Guess the Number Game", file=stdout)
    print("---------------------", file=stdout)
    print("", file=stdout)

    steps = [
        ("Think of a number between 1 and 10",),
        ("Multiply your number by", puzzle.first_number),
        ("Multiply the result by", puzzle.second_number),
        ("Divide the result by the number you originally thought of",),
        ("Now subtract", puzzle.subtraction),
    ]
    for step in steps:
        print(*step, PROMPT, file=stdout)
        stdout.flush()
        stdin.readline()

    print("The answer is", puzzle.answer, file=stdout)


def main(argv: list[str] | None = None) -> int:
    """Play one round on standard input and output."""
    play_game(new_puzzle(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())