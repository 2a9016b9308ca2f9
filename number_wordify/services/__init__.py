from .scales import (
    GroupingRule,
    ScaleSystem,
    INTERNATIONAL,
    INDIAN,
    SCALE_SYSTEMS,
    get_scale_system,
)
from .currencies import Currency, CURRENCIES, currency_units
from .words_service import (
    convert_three_digit_group,
    number_to_words,
    format_currency_in_words,
    money_to_words,
    amount_in_words,
    WordifyService,
)

__all__ = [
    "GroupingRule",
    "ScaleSystem",
    "INTERNATIONAL",
    "INDIAN",
    "SCALE_SYSTEMS",
    "get_scale_system",
    "Currency",
    "CURRENCIES",
    "currency_units",
    "convert_three_digit_group",
    "number_to_words",
    "format_currency_in_words",
    "money_to_words",
    "amount_in_words",
    "WordifyService",
]
