"""
Localized formatting and Plotly figures for projection results.
"""
from typing import List, Tuple

import pandas as pd
import plotly.graph_objects as go

from config import CONFIG, DEFAULT_LANGUAGE
from investment_projection import ProjectionResult, series_frame
from translations import t

NOMINAL_COLOR = '#8884d8'
ADJUSTED_COLOR = '#82ca9d'

def _locale(lang: str) -> dict:
    return CONFIG.get(lang, CONFIG[DEFAULT_LANGUAGE])

def _localize_number(text: str, locale: dict) -> str:
    return text.translate(str.maketrans({',': locale['thousands_separator'], '.': locale['decimal_separator']}))

def format_currency(amount: float, lang: str = DEFAULT_LANGUAGE) -> str:
    """Format an amount the way the language's locale writes its currency, e.g. $1,234.50 or 1 234,50 kr."""
    locale = _locale(lang)
    number = _localize_number(f"{abs(amount):,.2f}", locale)
    sign = '-' if amount < 0 else ''
    if locale['symbol_position'] == 'prefix':
        return f"{sign}{locale['currency_symbol']}{number}"
    return f"{sign}{number} {locale['currency_symbol']}"

def format_percent(value: float, lang: str = DEFAULT_LANGUAGE) -> str:
    return _localize_number(f"{value:.1f}", _locale(lang)) + '%'

def summary_lines(result: ProjectionResult, lang: str = DEFAULT_LANGUAGE) -> List[Tuple[str, str]]:
    return [
        (t("future_value", lang), format_currency(result.future_value, lang)),
        (t("inflation_adjusted_value", lang), format_currency(result.inflation_adjusted_future_value, lang)),
        (t("total_contributions", lang), format_currency(result.total_contributions, lang)),
        (t("total_gain", lang), format_currency(result.total_gain, lang)),
    ]

def create_growth_chart(result: ProjectionResult, lang: str = DEFAULT_LANGUAGE) -> go.Figure:
    df = series_frame(result)
    years = max(len(df) - 1, 0)
    symbol = _locale(lang)['currency_symbol']
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df.index, y=df['value'], mode='lines', name=t("future_value", lang),
        line=dict(color=NOMINAL_COLOR, width=2),
        hovertemplate=f"%{{y:,.0f}} {symbol}<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        x=df.index, y=df['adjusted_value'], mode='lines', name=t("inflation_adjusted_value", lang),
        line=dict(color=ADJUSTED_COLOR, width=2),
        hovertemplate=f"%{{y:,.0f}} {symbol}<extra></extra>"
    ))
    fig.update_layout(
        title=t("growth_chart_title", lang, years=years), xaxis_title=t("year", lang),
        yaxis_title=t("value", lang), hovermode="x unified",
        legend=dict(yanchor="top", y=0.99, xanchor="left", x=0.01)
    )
    return fig

def projection_table(result: ProjectionResult, lang: str = DEFAULT_LANGUAGE) -> pd.DataFrame:
    """Series as a DataFrame with localized column headers and currency strings."""
    df = series_frame(result)
    table = pd.DataFrame({
        t("future_value", lang): [format_currency(v, lang) for v in df['value']],
        t("inflation_adjusted_value", lang): [format_currency(v, lang) for v in df['adjusted_value']],
    }, index=df.index)
    table.index.name = t("year", lang)
    return table
