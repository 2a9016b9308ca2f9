# services/words_service.py
# Spells amounts in English words under a pluggable scale system
# (International or Indian grouping) including currency main & fractional units.
# Exposes: convert_three_digit_group, number_to_words, format_currency_in_words,
#          amount_in_words, money_to_words, WordifyService

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple, Union

from number_wordify.constants import (
    AND, DEFAULT_FRACTIONAL_FACTOR, HUNDRED, ONES, ONLY, TEENS, TENS, ZERO,
)
from number_wordify.core.config import Config, get_config
from number_wordify.exceptions import (
    InvalidAmountError,
    InvalidValueError,
    NegativeAmountError,
    OutOfRangeError,
    ScaleOverflowError,
)
from number_wordify.services.currencies import currency_units
from number_wordify.services.scales import INDIAN, INTERNATIONAL, ScaleSystem, get_scale_system

logger = logging.getLogger(__name__)

Amount = Union[int, float, Decimal]
ScaleLike = Union[str, ScaleSystem, None]


# ------------------------------------------------------------------
# NUMBER → WORDS
# ------------------------------------------------------------------

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def convert_three_digit_group(n: int) -> str:
    """Spell an integer in [0, 999]; 0 gives an empty string."""
    if not _is_int(n) or not 0 <= n <= 999:
        raise OutOfRangeError(n)

    hundreds, remainder = divmod(n, 100)
    ones_digit = n % 10

    words = []
    if hundreds > 0:
        words.append(ONES[hundreds])
        words.append(HUNDRED)

    if remainder >= 20:
        words.append(TENS[remainder // 10])
        if ones_digit > 0:
            words.append(ONES[ones_digit])
    elif remainder >= 10:
        words.append(TEENS[remainder - 10])
    elif ones_digit > 0:
        words.append(ONES[ones_digit])

    return " ".join(words).strip()


def number_to_words(amount: int, scale: ScaleLike = INTERNATIONAL) -> str:
    """
    Spell a non-negative integer with the scale words of `scale`.

    Zero gives an empty string; callers decide whether to render "Zero".
    Raises ScaleOverflowError when the amount needs a group the scale
    system has no word for.
    """
    scale = get_scale_system(scale)

    if not _is_int(amount):
        raise InvalidValueError("amount", amount, "expected an integer")
    if amount < 0:
        raise NegativeAmountError(amount)
    if amount == 0:
        return ""
    if amount > scale.max_amount:
        raise ScaleOverflowError(amount, scale.name, scale.max_amount)

    # Peel groups least-significant first
    groups = []
    index = 0
    while amount > 0:
        amount, group = divmod(amount, scale.grouping.divisor_for(index))
        groups.append(group)
        index += 1

    words = []
    for index in reversed(range(len(groups))):
        group = groups[index]
        if group == 0:
            continue
        words.append(convert_three_digit_group(group))
        if index > 0:
            words.append(scale.scale_words[index])

    return " ".join(words)


# ------------------------------------------------------------------
# CURRENCY SENTENCE
# ------------------------------------------------------------------

def _split_amount(amount: Amount, scale: ScaleSystem, fractional_factor: int) -> Tuple[int, int]:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmountError(amount)
    if isinstance(amount, Decimal):
        finite = amount.is_finite()
    else:
        finite = isinstance(amount, int) or math.isfinite(amount)
    if not finite:
        raise InvalidAmountError(amount)
    if amount < 0:
        raise NegativeAmountError(amount)
    # Compare before flooring: floor of Decimal("1e999999999") would build a huge int
    if amount >= scale.capacity:
        raise ScaleOverflowError(amount, scale.name, scale.max_amount)

    whole = math.floor(amount)

    # Half-up rounding on the exact binary value of amount * factor
    scaled = Decimal(amount * fractional_factor)
    fractional = int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP)) % fractional_factor
    return whole, fractional


def format_currency_in_words(
        amount: Amount,
        scale: ScaleLike,
        main_unit: str,
        sub_unit: str,
        fractional_factor: int = DEFAULT_FRACTIONAL_FACTOR,
        *,
        main_unit_singular: Optional[str] = None,
        sub_unit_singular: Optional[str] = None,
) -> str:
    """
    Build "<whole> <main_unit> And <fractional> <sub_unit> Only".

    Unit labels are used as given whatever the value ("One Rupees Only").
    Passing main_unit_singular / sub_unit_singular switches to that label
    when the corresponding part equals one.
    """
    scale = get_scale_system(scale)
    if not _is_int(fractional_factor) or fractional_factor <= 0:
        raise InvalidValueError(
            "fractional_factor", fractional_factor, "expected a positive integer"
        )

    whole, fractional = _split_amount(amount, scale, fractional_factor)

    if whole == 0 and fractional == 0:
        return f"{ZERO} {main_unit} {ONLY}"

    main_label = main_unit_singular if main_unit_singular and whole == 1 else main_unit
    sub_label = sub_unit_singular if sub_unit_singular and fractional == 1 else sub_unit

    words = []
    if whole != 0:
        words.append(number_to_words(whole, scale))
    else:
        words.append(ZERO)
    words.append(main_label)

    if fractional != 0:
        words.append(AND)
        words.append(number_to_words(fractional, scale))
        words.append(sub_label)

    words.append(ONLY)
    return " ".join(words)


def money_to_words(amount: Amount) -> str:
    """Indian rupees shortcut: Indian grouping, Rupees / Paisa."""
    return format_currency_in_words(amount, INDIAN, "Rupees", "Paisa", 100)


# ------------------------------------------------------------------
# PUBLIC API
# ------------------------------------------------------------------

def amount_in_words(
        amount: Amount,
        currency_code: Optional[str] = None,
        scale: ScaleLike = None,
        singular: Optional[bool] = None,
) -> str:
    """Convert a monetary amount to words using configured defaults where omitted."""
    return WordifyService().amount_in_words(amount, currency_code, scale, singular)


class WordifyService:
    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()

    def default_scale(self) -> ScaleSystem:
        return get_scale_system(self.config.get("WORDIFY_SCALE"))

    def amount_in_words(
            self,
            amount: Amount,
            currency_code: Optional[str] = None,
            scale: ScaleLike = None,
            singular: Optional[bool] = None,
    ) -> str:
        currency = currency_units(currency_code or self.config.get("WORDIFY_CURRENCY"))
        scale_system = get_scale_system(scale) if scale else self.default_scale()
        if singular is None:
            singular = self.config.get_bool("WORDIFY_SINGULAR_UNITS")

        logger.debug(
            f"Spelling {amount!r} as {currency.code} on the {scale_system.name} scale"
            f" (singular={singular})"
        )

        return format_currency_in_words(
            amount,
            scale_system,
            currency.main_unit,
            currency.sub_unit,
            currency.fractional_factor,
            main_unit_singular=currency.main_unit_singular if singular else None,
            sub_unit_singular=currency.sub_unit_singular if singular else None,
        )
