"""
Translations and help text for the Investment Growth Calculator.
Supports English (EN) and Norwegian (NO).
"""

TRANSLATIONS = {
    # Page title and header
    "page_title": {
        "EN": "Investment Calculator",
        "NO": "Investeringskalkulator"
    },
    "title": {
        "EN": "Investment Growth Calculator",
        "NO": "Kalkulator for investeringsvekst"
    },
    "description": {
        "EN": "See how your investment can grow over time with compound interest and regular contributions.",
        "NO": "Se hvordan investeringen din kan vokse over tid med rentes rente og faste innskudd."
    },
    "language": {
        "EN": "Language",
        "NO": "Språk"
    },

    # Inputs
    "initial_investment": {
        "EN": "Initial Investment",
        "NO": "Første investering"
    },
    "annual_return": {
        "EN": "Annual Return (%)",
        "NO": "Årlig avkastning (%)"
    },
    "years": {
        "EN": "Investment Period (Years)",
        "NO": "Investeringsperiode (år)"
    },
    "compounding_frequency": {
        "EN": "Compounding Frequency",
        "NO": "Renteberegningsfrekvens"
    },
    "annually": {
        "EN": "Annually",
        "NO": "Årlig"
    },
    "monthly": {
        "EN": "Monthly",
        "NO": "Månedlig"
    },
    "daily": {
        "EN": "Daily",
        "NO": "Daglig"
    },
    "monthly_contributions": {
        "EN": "Monthly Contributions",
        "NO": "Månedlige innskudd"
    },
    "inflation_rate": {
        "EN": "Inflation Rate (%)",
        "NO": "Inflasjonsrate (%)"
    },

    # Results
    "results": {
        "EN": "Results",
        "NO": "Resultater"
    },
    "future_value": {
        "EN": "Future Value",
        "NO": "Fremtidig verdi"
    },
    "inflation_adjusted_value": {
        "EN": "Inflation-Adjusted Value",
        "NO": "Inflasjonsjustert verdi"
    },
    "total_contributions": {
        "EN": "Total Contributions",
        "NO": "Totale innskudd"
    },
    "total_gain": {
        "EN": "Total Gain",
        "NO": "Total gevinst"
    },

    # Chart and table
    "year": {
        "EN": "Year",
        "NO": "År"
    },
    "value": {
        "EN": "Value",
        "NO": "Verdi"
    },
    "growth_chart_title": {
        "EN": "Projected Growth over {years} Years",
        "NO": "Forventet vekst over {years} år"
    },
    "projection_table": {
        "EN": "Year-by-Year Projection",
        "NO": "Fremskrivning år for år"
    },

    # Report
    "download_report": {
        "EN": "Download Report",
        "NO": "Last ned rapport"
    },
    "generate_pdf": {
        "EN": "Generate PDF Report",
        "NO": "Lag PDF-rapport"
    },
    "generating_pdf": {
        "EN": "Generating PDF report...",
        "NO": "Lager PDF-rapport..."
    },
    "download_pdf": {
        "EN": "Download PDF",
        "NO": "Last ned PDF"
    },
    "report_title": {
        "EN": "Investment Growth Report",
        "NO": "Rapport om investeringsvekst"
    },
    "assumptions": {
        "EN": "Assumptions",
        "NO": "Forutsetninger"
    },
    "charts": {
        "EN": "Charts",
        "NO": "Diagrammer"
    },
    "charts_unavailable": {
        "EN": "Note: Charts could not be included in this PDF. Image export requires Kaleido, "
              "which is not available in this environment.",
        "NO": "Merk: Diagrammene kunne ikke tas med i denne PDF-en. Bildeeksport krever Kaleido, "
              "som ikke er tilgjengelig i dette miljøet."
    },
    "page": {
        "EN": "Page {page}",
        "NO": "Side {page}"
    },
}

HELP_TEXT = {
    "annual_return": {
        "EN": "The expected yearly return on your investment before inflation.",
        "NO": "Forventet årlig avkastning på investeringen før inflasjon."
    },
    "compounding_frequency": {
        "EN": "How often interest is added to your balance. More frequent compounding grows slightly faster.",
        "NO": "Hvor ofte renter legges til saldoen. Hyppigere renteberegning gir litt raskere vekst."
    },
    "inflation_rate": {
        "EN": "The expected yearly rise in prices, used to express the future value in today's money.",
        "NO": "Forventet årlig prisstigning, brukt til å uttrykke fremtidig verdi i dagens kroner."
    },
}


def t(key: str, lang: str = "EN", **kwargs) -> str:
    """Get translated text for a key."""
    text = TRANSLATIONS.get(key, {}).get(lang, key)
    if kwargs:
        text = text.format(**kwargs)
    return text


def h(key: str, lang: str = "EN") -> str:
    """Get help text for a key."""
    return HELP_TEXT.get(key, {}).get(lang, "")
