"""Interactive console conversation with the doctor."""

from __future__ import annotations

import random
import sys
from typing import Iterable, Iterator, TextIO

from learnbits.doctor import Chooser, intro, response

PROMPT = "-> "
QUIT_WORD = "quit"


def converse(lines: Iterable[str], rng: Chooser | None = None) -> Iterator[str]:
    """Yield a reply for each line until the user types the quit word."""
    for line in lines:
        text = line.replace("\r\n", "").replace("\n", "")
        if text == QUIT_WORD:
            return
        yield response(text, rng)


def _prompted_lines(stdin: TextIO, stdout: TextIO) -> Iterator[str]:
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return
        yield line


def main(argv: list[str] | None = None) -> int:
    """Run the conversation on standard input and output."""
    print(intro())
    for reply in converse(_prompted_lines(sys.stdin, sys.stdout), random.Random()):
        print(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())