import logging

import streamlit as st
import plotly.io as pio

from charts import create_growth_chart, format_percent, projection_table, summary_lines
from config import COMPOUNDING_FREQUENCIES, CONFIG, DEFAULT_LANGUAGE, DEFAULTS, INPUT_LIMITS
from inputs import build_projection_input
from investment_projection import ProjectionInput, ProjectionResult, project
from pdf_report import generate_pdf_report
from translations import t, h

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

pio.templates.default = "plotly_white"

@st.cache_data
def cached_projection(params: ProjectionInput) -> ProjectionResult:
    logger.debug("Projecting %s", params)
    return project(params)

def set_language(lang):
    st.session_state['lang'] = lang

if 'lang' not in st.session_state:
    st.session_state['lang'] = DEFAULT_LANGUAGE

L = st.session_state['lang']
st.set_page_config(layout="wide", page_title=t("page_title", L))

header_col, language_col = st.columns([4, 1])
with header_col:
    st.title(t("title", L))
    st.write(t("description", L))
with language_col:
    st.caption(t("language", L))
    for lang_key, lang_config in CONFIG.items():
        st.button(lang_config['name'], key=f"lang_{lang_key}", on_click=set_language, args=(lang_key,))

input_col, results_col = st.columns(2)

with input_col:
    investment_min, _, investment_step = INPUT_LIMITS['initial_investment']
    initial_investment = st.number_input(
        t("initial_investment", L), min_value=investment_min,
        value=DEFAULTS['initial_investment'], step=investment_step
    )

    return_min, return_max, return_step = INPUT_LIMITS['annual_return_percent']
    annual_return = st.slider(
        t("annual_return", L), return_min, return_max, DEFAULTS['annual_return_percent'], return_step,
        help=h("annual_return", L)
    )
    st.markdown(f"<div style='text-align: right'>{format_percent(annual_return, L)}</div>", unsafe_allow_html=True)

    years_min, _, years_step = INPUT_LIMITS['years']
    years = st.number_input(t("years", L), min_value=years_min, value=DEFAULTS['years'], step=years_step)

    compounding_frequency = st.selectbox(
        t("compounding_frequency", L), COMPOUNDING_FREQUENCIES,
        index=COMPOUNDING_FREQUENCIES.index(DEFAULTS['compounding_frequency']),
        format_func=lambda freq: t(freq, L), help=h("compounding_frequency", L)
    )

    contribution_min, _, contribution_step = INPUT_LIMITS['monthly_contribution']
    monthly_contribution = st.number_input(
        t("monthly_contributions", L), min_value=contribution_min,
        value=DEFAULTS['monthly_contribution'], step=contribution_step
    )

    inflation_min, inflation_max, inflation_step = INPUT_LIMITS['inflation_rate_percent']
    inflation_rate = st.slider(
        t("inflation_rate", L), inflation_min, inflation_max, DEFAULTS['inflation_rate_percent'], inflation_step,
        help=h("inflation_rate", L)
    )
    st.markdown(f"<div style='text-align: right'>{format_percent(inflation_rate, L)}</div>", unsafe_allow_html=True)

params = build_projection_input(
    initial_investment=initial_investment, annual_return_percent=annual_return, years=years,
    compounding_frequency=compounding_frequency, monthly_contribution=monthly_contribution,
    inflation_rate_percent=inflation_rate
)
result = cached_projection(params)

with results_col:
    st.subheader(t("results", L))
    for label, amount in summary_lines(result, L):
        st.write(f"{label}: {amount}")

    growth_fig = create_growth_chart(result, L)
    st.plotly_chart(growth_fig, use_container_width=True)

with st.expander(t("projection_table", L), expanded=False):
    st.dataframe(projection_table(result, L), use_container_width=True)

st.header(t("download_report", L))
if st.button(t("generate_pdf", L)):
    with st.spinner(t("generating_pdf", L)):
        pdf_data = generate_pdf_report(params, result, L, figs=[growth_fig])
        st.download_button(
            label=t("download_pdf", L),
            data=pdf_data,
            file_name="investment_growth_report.pdf",
            mime="application/pdf"
        )
