# learnbits

A handful of small console programs for learning and play.

## Install

```
pip install .
```

## Commands

- `learnbits-eliza`: chat with Eliza, a pattern-matching therapist. It prints a greeting and then a `-> ` prompt. It answers each line you type. Type `quit` or end the input to leave.
- `learnbits-investment`: asks for an investment amount, a number of years and an expected return rate in percent. It then prints the future value, and the same value adjusted for 2.5% yearly inflation, both to two decimal places. If an answer is not a number, or the input ends early, it prints an error and exits with status 1.
- `learnbits-profit`: asks for revenue, expenses and tax rate in percent. It then prints earnings before tax, earnings after tax and the ratio of the two. A ratio with zero profit is shown as `NaN`, `+Inf` or `-Inf`. Bad or missing input ends the program with status 1.
- `learnbits-guess`: a "think of a number" trick. It leads you through five steps, waits for ENTER after each one, and then tells you the result.
- `learnbits-scope`: prints `1 2 3` and then `3`. This shows a module-level value, a local value and a shared value.

## Library use

```python
import io
import random

from learnbits.doctor import intro, response
from learnbits.eliza import converse
from learnbits.investment import calculate_future_values
from learnbits.profit import calculate, format_report
from learnbits.guessing import Puzzle, new_puzzle, play_game

print(intro())
print(response("I need a holiday", random.Random(1)))

for reply in converse(["hello\n", "I feel tired\n", "quit\n"], random.Random(2)):
    print(reply)

future, real = calculate_future_values(1000, 5, 10)

report = calculate(1000, 400, 20)   # ProfitReport(ebt, profit, ratio)
print(format_report(report))

puzzle = new_puzzle(random.Random(3))  # each number is between 2 and 10
print(puzzle.answer)                   # first_number * second_number - subtraction
play_game(Puzzle(3, 4, 5), io.StringIO("\n" * 5), io.StringIO())
```

- `response` takes anything that has a `choice` method as its random source. Without one, it uses the `random` module.
- `converse` yields one reply for each line. It stops at the line `quit`.
- `learnbits.scope.print_me(i1, i2, stdout)` prints the two values and then the shared value `3`.

## Tests

```
pip install .[test]
pytest
```