"""Future value of an investment, nominal and adjusted for inflation."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

INFLATION_RATE = 2.5


def calculate_future_values(
    investment_amount: float, expected_return_rate: float, years: float
) -> tuple[float, float]:
    """Return the future value and the inflation-adjusted future value."""
    future_value = investment_amount * (1 + expected_return_rate / 100) ** years
    real_value = future_value / (1 + INFLATION_RATE / 100) ** years
    return future_value, real_value


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> float:
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"expected a number, got {token!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Ask for the inputs on standard input and print both future values."""
    tokens = _tokens(sys.stdin)
    try:
        amount = _ask("Investment amount:  ", tokens)
        years = _ask("For how many years?:  ", tokens)
        rate = _ask("Expected return rate: ", tokens)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    future_value, real_value = calculate_future_values(amount, rate, years)
    print(f"Future Value: {future_value:.2f}")
    print(f"Future Value (adjusted for inflation): {real_value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())