from __future__ import annotations

import logging

import plotly.graph_objects as go
import pytest

from charts import create_growth_chart
from investment_projection import ProjectionInput, project
from pdf_report import generate_pdf_report


@pytest.fixture()
def params() -> ProjectionInput:
    return ProjectionInput(
        initial_investment=10000.0,
        annual_return_percent=7.0,
        years=10,
        compounding_frequency="monthly",
        monthly_contribution=100.0,
        inflation_rate_percent=2.0,
    )


@pytest.mark.parametrize("lang", ["EN", "NO"])
def test_report_without_charts_is_a_pdf(params, lang):
    pdf_data = generate_pdf_report(params, project(params), lang)

    assert isinstance(pdf_data, bytes)
    assert pdf_data.startswith(b"%PDF")


def test_failed_chart_export_still_produces_report(params, monkeypatch, caplog):
    def broken_write_image(self, *args, **kwargs):
        raise ValueError("Image export requires the kaleido package")

    monkeypatch.setattr(go.Figure, "write_image", broken_write_image)
    result = project(params)

    with caplog.at_level(logging.WARNING, logger="pdf_report"):
        pdf_data = generate_pdf_report(params, result, "EN", figs=[create_growth_chart(result, "EN")])

    assert pdf_data.startswith(b"%PDF")
    assert "Could not render chart" in caplog.text


def test_report_handles_empty_series(params):
    empty = ProjectionInput(**{**params.__dict__, "years": -1})
    pdf_data = generate_pdf_report(empty, project(empty), "NO")

    assert pdf_data.startswith(b"%PDF")
