"""
Investment Growth Calculator - Projection Engine
"""
import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from typing import List, Union

COMPOUNDING_PERIODS = {
    'annually': 1,
    'monthly': 12,
    'daily': 365,
}

@dataclass(frozen=True)
class ProjectionInput:
    initial_investment: float
    annual_return_percent: float
    years: int
    compounding_frequency: str
    monthly_contribution: float
    inflation_rate_percent: float

@dataclass(frozen=True)
class ProjectionPoint:
    year_index: int
    nominal_value: Union[int, float]
    inflation_adjusted_value: Union[int, float]

@dataclass(frozen=True)
class ProjectionResult:
    future_value: float
    inflation_adjusted_future_value: float
    total_contributions: float
    total_gain: float
    series: List[ProjectionPoint] = field(default_factory=list)

def periods_per_year(compounding_frequency: str) -> int:
    # Unknown frequencies compound once a year.
    return COMPOUNDING_PERIODS.get(compounding_frequency, 1)

def contribution_per_period(monthly_contribution: float, compounding_frequency: str) -> float:
    """
    Contribution added each compounding period.

    Annual compounding uses the monthly amount as-is; every other frequency uses
    twelve months' worth, regardless of how many periods the year has.
    """
    if compounding_frequency == 'annually':
        return monthly_contribution
    return monthly_contribution * 12

def _nominal_curve(params: ProjectionInput, elapsed: np.ndarray) -> np.ndarray:
    n = periods_per_year(params.compounding_frequency)
    contribution = contribution_per_period(params.monthly_contribution, params.compounding_frequency)
    periodic_rate = (params.annual_return_percent / 100) / n
    with np.errstate(all='ignore'):
        growth = np.power(1 + periodic_rate, n * elapsed)
        if periodic_rate == 0:
            contributed = contribution * n * elapsed
        else:
            contributed = contribution * (growth - 1) / periodic_rate
        return params.initial_investment * growth + contributed

def _real_curve(params: ProjectionInput, elapsed: np.ndarray, nominal: np.ndarray) -> np.ndarray:
    with np.errstate(all='ignore'):
        return nominal / np.power(1 + params.inflation_rate_percent / 100, elapsed)

def future_value_at(params: ProjectionInput, elapsed_years: int) -> float:
    """Nominal balance after `elapsed_years` of compounding and contributions."""
    elapsed = np.asarray(elapsed_years, dtype=np.float64)
    return float(_nominal_curve(params, elapsed))

def inflation_adjusted_at(params: ProjectionInput, elapsed_years: int) -> float:
    """Nominal balance at `elapsed_years` expressed in today's purchasing power."""
    elapsed = np.asarray(elapsed_years, dtype=np.float64)
    return float(_real_curve(params, elapsed, _nominal_curve(params, elapsed)))

def _round_half_up(value: float) -> Union[int, float]:
    # value + 0.5 can itself round up, so compare the fractional part instead.
    floored = np.floor(value)
    rounded = floored + (value - floored >= 0.5)
    return int(rounded) if np.isfinite(rounded) else float(rounded)

def project(params: ProjectionInput) -> ProjectionResult:
    """
    Project nominal and inflation-adjusted growth for every year from 0 to
    `params.years`.

    Inputs are not validated. A negative horizon yields an empty series and
    extrapolated top-line figures, and overflowing inputs come back as inf/nan
    instead of raising.
    """
    future_value = future_value_at(params, params.years)
    adjusted_future_value = inflation_adjusted_at(params, params.years)

    elapsed = np.arange(0, params.years + 1, dtype=np.float64)
    nominal = _nominal_curve(params, elapsed)
    adjusted = _real_curve(params, elapsed, nominal)
    series = [
        ProjectionPoint(
            year_index=i, nominal_value=_round_half_up(nominal[i]),
            inflation_adjusted_value=_round_half_up(adjusted[i])
        )
        for i in range(len(elapsed))
    ]

    total_contributions = params.initial_investment + params.monthly_contribution * 12 * params.years
    return ProjectionResult(
        future_value=future_value, inflation_adjusted_future_value=adjusted_future_value,
        total_contributions=total_contributions, total_gain=future_value - total_contributions,
        series=series
    )

def series_frame(result: ProjectionResult) -> pd.DataFrame:
    """Year-indexed table of the rounded series, as used by the chart and table views."""
    df = pd.DataFrame(
        [(p.year_index, p.nominal_value, p.inflation_adjusted_value) for p in result.series],
        columns=['year', 'value', 'adjusted_value']
    )
    return df.set_index('year')
