"""Earnings before and after tax, and their ratio."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, TextIO


@dataclass(frozen=True)
class ProfitReport:
    """Earnings before tax, earnings after tax and their ratio."""

    ebt: float
    profit: float
    ratio: float


def _divide(numerator: float, denominator: float) -> float:
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def calculate(revenue: float, expenses: float, tax_rate: float) -> ProfitReport:
    """Compute earnings before tax, after tax, and their ratio."""
    ebt = revenue - expenses
    profit = ebt * (1 - tax_rate / 100)
    return ProfitReport(ebt=ebt, profit=profit, ratio=_divide(ebt, profit))


def _format_float(value: float) -> str:
    """Shortest representation, exponent form only for very large or small values."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    magnitude = len(digits) + exponent - 1
    if magnitude < -4 or magnitude >= 21:
        text = "".join(map(str, digits))
        mantissa = text[0] + (f".{text[1:]}" if len(text) > 1 else "")
        body = f"{mantissa}e{'-' if magnitude < 0 else '+'}{abs(magnitude):02d}"
    else:
        body = format(Decimal((0, digits, exponent)), "f")
    return ("-" if sign else "") + body


def format_report(report: ProfitReport) -> str:
    """Render the report as three lines of text."""
    return "\n".join(
        [
            f"Earnings before tax:  {_format_float(report.ebt)}",
            f"Earnings after tax:  {_format_float(report.profit)}",
            f"Ratio:  {_format_float(report.ratio)}",
        ]
    )


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
    """Ask for revenue, expenses and tax rate, then print the report."""
    tokens = _tokens(sys.stdin)
    try:
        revenue = _ask("Revenue: ", tokens)
        expenses = _ask("Expenses: ", tokens)
        tax_rate = _ask("Tax Rate: ", tokens)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print()
    print(format_report(calculate(revenue, expenses, tax_rate)))
    return 0


if __name__ == "__main__":
    sys.exit(main())