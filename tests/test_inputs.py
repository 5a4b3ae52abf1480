from __future__ import annotations

import logging

import pytest

from inputs import build_projection_input, clamp


def test_clamp_respects_open_upper_bound():
    assert clamp(-5.0, 0.0, None) == 0.0
    assert clamp(1e9, 0.0, None) == 1e9
    assert clamp(25.0, 0.0, 20.0) == 20.0
    assert clamp(7.5, 0.0, 20.0) == 7.5


def test_build_projection_input_passes_in_range_values_through():
    params = build_projection_input(
        initial_investment=10000,
        annual_return_percent=7,
        years=10,
        compounding_frequency="monthly",
        monthly_contribution=100,
        inflation_rate_percent=2,
    )

    assert params.initial_investment == 10000.0
    assert params.annual_return_percent == 7.0
    assert params.years == 10
    assert isinstance(params.years, int)
    assert params.compounding_frequency == "monthly"
    assert params.monthly_contribution == 100.0
    assert params.inflation_rate_percent == 2.0


def test_build_projection_input_clamps_out_of_range_values(caplog):
    with caplog.at_level(logging.DEBUG, logger="inputs"):
        params = build_projection_input(
            initial_investment=-50,
            annual_return_percent=35,
            years=-4,
            compounding_frequency="daily",
            monthly_contribution=-1,
            inflation_rate_percent=12.5,
        )

    assert params.initial_investment == 0.0
    assert params.annual_return_percent == 20.0
    assert params.years == 0
    assert params.monthly_contribution == 0.0
    assert params.inflation_rate_percent == 10.0
    assert "Clamped annual_return_percent" in caplog.text


def test_build_projection_input_coerces_strings():
    params = build_projection_input("2500", "4.5", "8", "annually", "75", "1.5")

    assert params.initial_investment == 2500.0
    assert params.annual_return_percent == 4.5
    assert params.years == 8


def test_unknown_frequency_is_rejected():
    with pytest.raises(ValueError, match="weekly"):
        build_projection_input(1000, 5, 5, "weekly", 0, 2)
