"""Debug script to trace projection values"""
from typing import List

from investment_projection import ProjectionInput, project

REFERENCE_SCENARIOS = {
    "7% ANNUAL, 10 YEARS": ProjectionInput(
        initial_investment=10000,
        annual_return_percent=7,
        years=10,
        compounding_frequency='annually',
        monthly_contribution=100,
        inflation_rate_percent=2
    ),
    "ZERO RETURN, MONTHLY, 5 YEARS": ProjectionInput(
        initial_investment=1000,
        annual_return_percent=0,
        years=5,
        compounding_frequency='monthly',
        monthly_contribution=50,
        inflation_rate_percent=0
    ),
}

def trace_lines(params: ProjectionInput) -> List[str]:
    result = project(params)
    lines = [
        f"Inputs: P={params.initial_investment:,.0f} r={params.annual_return_percent}% "
        f"t={params.years} freq={params.compounding_frequency} "
        f"monthly={params.monthly_contribution:,.0f} inflation={params.inflation_rate_percent}%",
        "",
        "Key milestones:",
    ]
    for point in result.series:
        if point.year_index % 5 and point.year_index != params.years:
            continue
        lines.append(
            f"  Year {point.year_index:>3}: ${point.nominal_value:,.0f} (real: ${point.inflation_adjusted_value:,.0f})"
        )
    lines += [
        "",
        f"Future value: ${result.future_value:,.2f}",
        f"Inflation-adjusted: ${result.inflation_adjusted_future_value:,.2f}",
        f"Total contributions: ${result.total_contributions:,.2f}",
        f"Total gain: ${result.total_gain:,.2f}",
    ]
    return lines

def main():
    for name, params in REFERENCE_SCENARIOS.items():
        print("=" * 60)
        print(name)
        print("=" * 60)
        for line in trace_lines(params):
            print(line)
        print()

if __name__ == "__main__":
    main()
