"""
Configuration for the Investment Growth Calculator
This file centralizes the display settings for each supported language
and the bounds the input widgets enforce.
"""

DEFAULT_LANGUAGE = 'EN'

CONFIG = {
    'EN': {
        'name': 'English',
        'lang_code': 'en-US',
        'currency_code': 'USD',
        'currency_symbol': '$',
        'symbol_position': 'prefix',
        'thousands_separator': ',',
        'decimal_separator': '.',
    },
    'NO': {
        'name': 'Norsk',
        'lang_code': 'nb-NO',
        'currency_code': 'NOK',
        'currency_symbol': 'kr',
        'symbol_position': 'suffix',
        'thousands_separator': '\u00a0',
        'decimal_separator': ',',
    }
}

COMPOUNDING_FREQUENCIES = ['annually', 'monthly', 'daily']

# (min, max, step); None means unbounded above.
INPUT_LIMITS = {
    'initial_investment': (0.0, None, 1000.0),
    'annual_return_percent': (0.0, 20.0, 0.1),
    'years': (0, None, 1),
    'monthly_contribution': (0.0, None, 10.0),
    'inflation_rate_percent': (0.0, 10.0, 0.1),
}

DEFAULTS = {
    'initial_investment': 10000.0,
    'annual_return_percent': 7.0,
    'years': 10,
    'compounding_frequency': 'annually',
    'monthly_contribution': 100.0,
    'inflation_rate_percent': 2.0,
}
