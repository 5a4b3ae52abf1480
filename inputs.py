"""
Maps raw widget values onto a ProjectionInput.

The projection engine accepts anything; keeping values inside the ranges the
calculator offers is done here.
"""
import logging
from typing import Optional

from config import COMPOUNDING_FREQUENCIES, INPUT_LIMITS
from investment_projection import ProjectionInput

logger = logging.getLogger(__name__)


def clamp(value: float, low: float, high: Optional[float]) -> float:
    if value < low:
        return low
    if high is not None and value > high:
        return high
    return value


def _bounded(name: str, value: float) -> float:
    low, high, _ = INPUT_LIMITS[name]
    bounded = clamp(value, low, high)
    if bounded != value:
        logger.debug("Clamped %s from %s to %s", name, value, bounded)
    return bounded


def build_projection_input(initial_investment, annual_return_percent, years, compounding_frequency,
                           monthly_contribution, inflation_rate_percent) -> ProjectionInput:
    if compounding_frequency not in COMPOUNDING_FREQUENCIES:
        raise ValueError(f"Unknown compounding frequency: {compounding_frequency}")
    return ProjectionInput(
        initial_investment=_bounded('initial_investment', float(initial_investment)),
        annual_return_percent=_bounded('annual_return_percent', float(annual_return_percent)),
        years=int(_bounded('years', int(years))),
        compounding_frequency=compounding_frequency,
        monthly_contribution=_bounded('monthly_contribution', float(monthly_contribution)),
        inflation_rate_percent=_bounded('inflation_rate_percent', float(inflation_rate_percent)),
    )
