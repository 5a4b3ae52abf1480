import logging
import os
import tempfile
import time

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from charts import format_currency, format_percent, summary_lines
from config import DEFAULT_LANGUAGE
from translations import t

logger = logging.getLogger(__name__)

class PDF(FPDF):
    def __init__(self, lang=DEFAULT_LANGUAGE):
        super().__init__()
        self.report_lang = lang

    def header(self):
        self.set_font('Helvetica', 'B', 12)
        self.cell(0, 10, t("report_title", self.report_lang), align='C')
        self.ln(20)

    def footer(self):
        self.set_y(-15)
        self.set_font('Helvetica', 'I', 8)
        self.cell(0, 10, t("page", self.report_lang, page=self.page_no()), align='C')

def _section(pdf, title, size=16):
    pdf.set_font('Helvetica', 'B', size)
    pdf.cell(0, 10, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

def _key_value_rows(pdf, rows):
    for key, value in rows:
        pdf.set_font('Helvetica', 'B', 10)
        pdf.cell(90, 8, f"{key}:")
        pdf.set_font('Helvetica', '', 10)
        pdf.cell(90, 8, str(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(5)

def _add_charts(pdf, figs, lang):
    chart_paths = []
    with tempfile.TemporaryDirectory() as tmp_dir:
        for i, fig in enumerate(figs):
            chart_title = fig.layout.title.text if fig.layout.title.text else f"Chart {i+1}"
            path = os.path.join(tmp_dir, f"chart_{i}.png")
            try:
                start_time = time.time()
                fig.write_image(path)
                logger.info("Rendered chart '%s' in %.2f seconds", chart_title, time.time() - start_time)
                chart_paths.append(path)
            except Exception as e:
                logger.warning("Could not render chart '%s': %s", chart_title, e)
                pdf.set_font('Helvetica', 'I', 10)
                pdf.multi_cell(0, 5, t("charts_unavailable", lang))
                pdf.ln(5)
                break

        for path in chart_paths:
            pdf.image(path, w=180)
            pdf.ln(2)

def generate_pdf_report(params, result, lang=DEFAULT_LANGUAGE, figs=()):
    """Build a PDF with the inputs, the headline figures, the yearly series and any charts."""
    pdf = PDF(lang)
    pdf.add_page()

    # --- Assumptions ---
    _section(pdf, t("assumptions", lang))
    _key_value_rows(pdf, [
        (t("initial_investment", lang), format_currency(params.initial_investment, lang)),
        (t("annual_return", lang), format_percent(params.annual_return_percent, lang)),
        (t("years", lang), params.years),
        (t("compounding_frequency", lang), t(params.compounding_frequency, lang)),
        (t("monthly_contributions", lang), format_currency(params.monthly_contribution, lang)),
        (t("inflation_rate", lang), format_percent(params.inflation_rate_percent, lang)),
    ])

    # --- Results ---
    _section(pdf, t("results", lang))
    _key_value_rows(pdf, summary_lines(result, lang))

    _section(pdf, t("projection_table", lang), size=12)
    pdf.set_font('Helvetica', 'B', 10)
    pdf.cell(30, 7, t("year", lang), border=1)
    pdf.cell(70, 7, t("future_value", lang), border=1)
    pdf.cell(70, 7, t("inflation_adjusted_value", lang), border=1, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font('Helvetica', '', 10)
    for point in result.series:
        pdf.cell(30, 7, str(point.year_index), border=1)
        pdf.cell(70, 7, format_currency(point.nominal_value, lang), border=1, align='R')
        pdf.cell(70, 7, format_currency(point.inflation_adjusted_value, lang), border=1, align='R',
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(5)

    if figs:
        pdf.add_page()
        _section(pdf, t("charts", lang), size=12)
        _add_charts(pdf, figs, lang)

    return bytes(pdf.output())
