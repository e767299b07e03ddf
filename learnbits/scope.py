"""Shows values defined at module level and locally."""

from __future__ import annotations

import sys
from typing import TextIO

PACKAGE_VAR = 3
MY_VAR = 1


def print_me(i1: int, i2: int, stdout: TextIO | None = None) -> None:
    """Print the two values followed by the module-level value."""
    print(i1, i2, PACKAGE_VAR, file=stdout if stdout is not None else sys.stdout)


def main(argv: list[str] | None = None) -> int:
    """Print a module-level value, a local value and the shared value."""
    block_var = 2
    print_me(MY_VAR, block_var)
    print(PACKAGE_VAR)
    return 0


if __name__ == "__main__":
    sys.exit(main())