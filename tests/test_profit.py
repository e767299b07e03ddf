import io
import math

import pytest

from learnbits.profit import ProfitReport, calculate, format_report, main


def test_no_tax_keeps_profit_equal_to_ebt():
    report = calculate(1000, 400, 0)
    assert report.profit == report.ebt
    assert report.ratio == 1


def test_ebt_is_revenue_less_expenses():
    assert calculate(1000, 400, 20).ebt == 600


def test_ratio_times_profit_gives_ebt():
    report = calculate(1234.5, 234.5, 17)
    assert report.ratio * report.profit == pytest.approx(report.ebt)


def test_full_tax_gives_infinite_ratio():
    assert calculate(1000, 400, 100).ratio == math.inf


def test_zero_over_zero_is_nan():
    report = calculate(500, 500, 100)
    assert report.ebt == 0
    assert report.profit == 0
    assert math.isnan(report.ratio) is True


def test_format_report_whole_and_fractional_numbers():
    report = ProfitReport(ebt=600.0, profit=480.0, ratio=1.25)
    assert format_report(report) == (
        "Earnings before tax:  600\n"
        "Earnings after tax:  480\n"
        "Ratio:  1.25"
    )


def test_format_report_extreme_values():
    report = ProfitReport(ebt=1e21, profit=1e-05, ratio=math.inf)
    lines = format_report(report).split("\n")
    assert lines == [
        "Earnings before tax:  1e+21",
        "Earnings after tax:  1e-05",
        "Ratio:  +Inf",
    ]


def test_format_report_large_fixed_and_nan():
    report = ProfitReport(ebt=1e20, profit=-0.0001, ratio=math.nan)
    lines = format_report(report).split("\n")
    assert lines[0] == "Earnings before tax:  100000000000000000000"
    assert lines[1] == "Earnings after tax:  -0.0001"
    assert lines[2] == "Ratio:  NaN"


def test_main_prints_report(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1000\n400\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Revenue: Expenses: Tax Rate: \n")
    assert out.endswith(format_report(calculate(1000, 400, 0)) + "\n")
    assert "Ratio:  1\n" in out


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10 x\n"))
    assert main() == 1
    assert "'x'" in capsys.readouterr().err