from __future__ import annotations

from debug_projection import REFERENCE_SCENARIOS, main, trace_lines


def test_zero_return_trace_reports_linear_total():
    lines = trace_lines(REFERENCE_SCENARIOS["ZERO RETURN, MONTHLY, 5 YEARS"])

    assert "Future value: $37,000.00" in lines
    assert "Total contributions: $4,000.00" in lines
    assert any(line.strip().startswith("Year   5:") for line in lines)


def test_trace_lists_milestone_years_only():
    lines = trace_lines(REFERENCE_SCENARIOS["7% ANNUAL, 10 YEARS"])
    years = [line.split(":")[0].strip() for line in lines if line.strip().startswith("Year")]

    assert years == ["Year   0", "Year   5", "Year  10"]


def test_main_prints_every_scenario(capsys):
    main()
    out = capsys.readouterr().out

    for name in REFERENCE_SCENARIOS:
        assert name in out
