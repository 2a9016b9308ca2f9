"""
number-wordify
==============

Spell monetary amounts in English words using International
(Thousand / Million / Billion) or Indian (Thousand / Lakh / Crore /
Arab / Kharab) digit grouping.

    >>> from number_wordify import format_currency_in_words, INDIAN
    >>> format_currency_in_words(1000000.0, INDIAN, "Rupees", "Paisa", 100)
    'Ten Lakh Rupees Only'
"""

from .version import VERSION as __version__
from .exceptions import (
    WordifyError,
    ValidationError,
    InvalidValueError,
    OutOfRangeError,
    NegativeAmountError,
    InvalidAmountError,
    ScaleOverflowError,
    ConfigurationError,
    UnknownScaleError,
    UnknownCurrencyError,
)
from .services import (
    GroupingRule,
    ScaleSystem,
    INTERNATIONAL,
    INDIAN,
    SCALE_SYSTEMS,
    get_scale_system,
    Currency,
    CURRENCIES,
    currency_units,
    convert_three_digit_group,
    number_to_words,
    format_currency_in_words,
    money_to_words,
    amount_in_words,
    WordifyService,
)

__all__ = [
    "__version__",
    # Errors
    "WordifyError",
    "ValidationError",
    "InvalidValueError",
    "OutOfRangeError",
    "NegativeAmountError",
    "InvalidAmountError",
    "ScaleOverflowError",
    "ConfigurationError",
    "UnknownScaleError",
    "UnknownCurrencyError",
    # Scale systems
    "GroupingRule",
    "ScaleSystem",
    "INTERNATIONAL",
    "INDIAN",
    "SCALE_SYSTEMS",
    "get_scale_system",
    # Currencies
    "Currency",
    "CURRENCIES",
    "currency_units",
    # Conversion
    "convert_three_digit_group",
    "number_to_words",
    "format_currency_in_words",
    "money_to_words",
    "amount_in_words",
    "WordifyService",
]
