# services/currencies.py
# Currency unit labels used when spelling monetary amounts.
# Exposes: Currency, CURRENCIES, currency_units(code)

from dataclasses import dataclass
from typing import Dict, Optional

from number_wordify.constants import DEFAULT_FRACTIONAL_FACTOR
from number_wordify.exceptions import UnknownCurrencyError


@dataclass(frozen=True)
class Currency:
    code: str
    main_unit: str
    sub_unit: str
    fractional_factor: int = DEFAULT_FRACTIONAL_FACTOR
    # Only used when singular labels are switched on
    main_unit_singular: Optional[str] = None
    sub_unit_singular: Optional[str] = None


# ------------------------------------------------------------------
# UNIFIED CURRENCY DEFINITIONS (single source of truth)
# ------------------------------------------------------------------

CURRENCIES: Dict[str, Currency] = {
    c.code: c
    for c in (
        Currency("INR", "Rupees", "Paisa", 100, "Rupee", "Paisa"),
        Currency("NPR", "Rupees", "Paisa", 100, "Rupee", "Paisa"),
        Currency("PKR", "Rupees", "Paisa", 100, "Rupee", "Paisa"),
        Currency("LKR", "Rupees", "Cents", 100, "Rupee", "Cent"),
        Currency("BDT", "Taka", "Poisha", 100, "Taka", "Poisha"),
        Currency("USD", "Dollars", "Cents", 100, "Dollar", "Cent"),
        Currency("EUR", "Euros", "Cents", 100, "Euro", "Cent"),
        Currency("GBP", "Pounds", "Pence", 100, "Pound", "Penny"),
        Currency("AED", "Dirhams", "Fils", 100, "Dirham", "Fils"),
        Currency("SAR", "Riyals", "Halalas", 100, "Riyal", "Halala"),
        Currency("KWD", "Dinars", "Fils", 1000, "Dinar", "Fils"),
        Currency("BHD", "Dinars", "Fils", 1000, "Dinar", "Fils"),
        Currency("OMR", "Rials", "Baisa", 1000, "Rial", "Baisa"),
    )
}


def currency_units(code: str) -> Currency:
    code = (code or "").strip().upper()

    cur = CURRENCIES.get(code)
    if cur is None:
        raise UnknownCurrencyError(code)
    return cur
