"""
tests/test_scales.py
====================
Scale systems, grouping rules and the currency registry.
All pure Python.
"""
import pytest

from number_wordify.constants import INDIAN_SCALE, INTERNATIONAL_SCALE, ONES, TEENS, TENS
from number_wordify.exceptions import ConfigurationError, UnknownCurrencyError, UnknownScaleError
from number_wordify.services.currencies import CURRENCIES, Currency, currency_units
from number_wordify.services.scales import (
    INDIAN,
    INTERNATIONAL,
    SCALE_SYSTEMS,
    GroupingRule,
    ScaleSystem,
    get_scale_system,
)


# ── word tables ───────────────────────────────────────────────────────────────

class TestWordTables:

    def test_table_sizes(self):
        assert len(ONES) == len(TEENS) == len(TENS) == 10

    def test_unused_slots_are_empty(self):
        assert ONES[0] == ""
        assert TENS[0] == TENS[1] == ""

    def test_scale_tables_start_empty(self):
        assert INTERNATIONAL_SCALE[0] == ""
        assert INDIAN_SCALE[0] == ""


# ── grouping rule ─────────────────────────────────────────────────────────────

class TestGroupingRule:

    def test_international_divisors(self):
        rule = INTERNATIONAL.grouping
        assert [rule.divisor_for(i) for i in range(4)] == [1000, 1000, 1000, 1000]

    def test_indian_divisors(self):
        rule = INDIAN.grouping
        assert [rule.divisor_for(i) for i in range(6)] == [1000, 100, 100, 100, 100, 100]

    @pytest.mark.parametrize("first,rest", [(1, 100), (1000, 0), (1001, 100), (1000, 5000), (1000, True)])
    def test_invalid_divisors(self, first, rest):
        with pytest.raises(ConfigurationError):
            GroupingRule(first_divisor=first, divisor=rest)


# ── scale system ──────────────────────────────────────────────────────────────

class TestScaleSystem:

    def test_capacity(self):
        assert INTERNATIONAL.capacity == 10 ** 12
        assert INDIAN.capacity == 10 ** 13
        assert INDIAN.max_amount == 99_99_99_99_99_999

    def test_scale_words_frozen_to_tuple(self):
        scale = ScaleSystem("two", ["", "Thousand"])
        assert scale.scale_words == ("", "Thousand")
        assert scale.grouping == GroupingRule(1000, 1000)
        assert scale.capacity == 10 ** 6

    def test_first_word_must_be_empty(self):
        with pytest.raises(ConfigurationError):
            ScaleSystem("bad", ("Units", "Thousand"))

    def test_empty_table_rejected(self):
        with pytest.raises(ConfigurationError):
            ScaleSystem("bad", ())

    def test_presets_are_immutable(self):
        with pytest.raises(AttributeError):
            INDIAN.name = "other"


class TestGetScaleSystem:

    def test_registry(self):
        assert SCALE_SYSTEMS == {"international": INTERNATIONAL, "indian": INDIAN}

    @pytest.mark.parametrize("value,expected", [
        ("indian", INDIAN),
        ("International", INTERNATIONAL),
        (None, INTERNATIONAL),
        (INDIAN, INDIAN),
    ])
    def test_resolve(self, value, expected):
        assert get_scale_system(value) is expected

    def test_unknown(self):
        with pytest.raises(UnknownScaleError) as exc:
            get_scale_system("Roman")
        assert exc.value.name == "roman"


# ── currencies ────────────────────────────────────────────────────────────────

class TestCurrencyUnits:

    @pytest.mark.parametrize("code,main,sub,factor", [
        ("INR", "Rupees",  "Paisa", 100),
        ("USD", "Dollars", "Cents", 100),
        ("GBP", "Pounds",  "Pence", 100),
        ("KWD", "Dinars",  "Fils",  1000),
    ])
    def test_known_currencies(self, code, main, sub, factor):
        cur = currency_units(code)
        assert (cur.main_unit, cur.sub_unit, cur.fractional_factor) == (main, sub, factor)

    def test_lowercase_code_normalised(self):
        assert currency_units(" inr ") is currency_units("INR")

    @pytest.mark.parametrize("code", ["XYZ", "", None])
    def test_unknown_code(self, code):
        with pytest.raises(UnknownCurrencyError):
            currency_units(code)

    def test_registry_keys_match_codes(self):
        for code, cur in CURRENCIES.items():
            assert isinstance(cur, Currency)
            assert cur.code == code
            assert cur.fractional_factor > 0
            assert cur.main_unit_singular and cur.sub_unit_singular
