from __future__ import annotations

import plotly.graph_objects as go

from charts import create_growth_chart, format_currency, format_percent, projection_table, summary_lines
from investment_projection import ProjectionInput, project


def sample_result(years: int = 5):
    return project(
        ProjectionInput(
            initial_investment=10000.0,
            annual_return_percent=7.0,
            years=years,
            compounding_frequency="annually",
            monthly_contribution=100.0,
            inflation_rate_percent=2.0,
        )
    )


def test_format_currency_english():
    assert format_currency(1234.5, "EN") == "$1,234.50"
    assert format_currency(-1234.5, "EN") == "-$1,234.50"
    assert format_currency(0, "EN") == "$0.00"


def test_format_currency_norwegian():
    assert format_currency(1234567.891, "NO") == "1\u00a0234\u00a0567,89 kr"
    assert format_currency(-10, "NO") == "-10,00 kr"


def test_format_currency_unknown_language_uses_default():
    assert format_currency(99.999, "DE") == "$100.00"


def test_format_percent():
    assert format_percent(7, "EN") == "7.0%"
    assert format_percent(2.5, "NO") == "2,5%"
    assert format_percent(0.1, "NO") == "0,1%"


def test_summary_lines_are_localized():
    result = sample_result()
    lines = dict(summary_lines(result, "NO"))

    assert list(lines) == ["Fremtidig verdi", "Inflasjonsjustert verdi", "Totale innskudd", "Total gevinst"]
    assert lines["Totale innskudd"] == "16\u00a0000,00 kr"


def test_growth_chart_has_nominal_and_adjusted_lines():
    result = sample_result()
    fig = create_growth_chart(result, "EN")

    assert isinstance(fig, go.Figure)
    assert [trace.name for trace in fig.data] == ["Future Value", "Inflation-Adjusted Value"]
    assert list(fig.data[0].x) == [0, 1, 2, 3, 4, 5]
    assert list(fig.data[0].y) == [p.nominal_value for p in result.series]
    assert list(fig.data[1].y) == [p.inflation_adjusted_value for p in result.series]
    assert fig.layout.title.text == "Projected Growth over 5 Years"
    assert fig.layout.xaxis.title.text == "Year"


def test_growth_chart_norwegian_labels():
    fig = create_growth_chart(sample_result(), "NO")

    assert fig.data[1].name == "Inflasjonsjustert verdi"
    assert fig.layout.yaxis.title.text == "Verdi"


def test_projection_table_formats_each_year():
    result = sample_result(years=2)
    table = projection_table(result, "EN")

    assert list(table.columns) == ["Future Value", "Inflation-Adjusted Value"]
    assert table.index.name == "Year"
    assert table.iloc[0, 0] == "$10,000.00"
    assert len(table) == 3
