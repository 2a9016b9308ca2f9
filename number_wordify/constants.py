"""
number-wordify Constants - Single Source of Truth
==================================================

Word tables shared by every scale system. All values are immutable tuples
so they can be read from any thread without locking.

Usage:
    from number_wordify.constants import ONES, TEENS, TENS
"""

# ==================== Digit Words ====================
# Index 0 is empty: there is no "Zero Hundred".
ONES = ("", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine")

# Indexed by value - 10
TEENS = (
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)

# Indices 0 and 1 are unused
TENS = ("", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")

HUNDRED = "Hundred"


# ==================== Scale Words ====================
# Index 0 is always empty: the lowest-order group has no suffix.
INTERNATIONAL_SCALE = ("", "Thousand", "Million", "Billion")
INDIAN_SCALE = ("", "Thousand", "Lakh", "Crore", "Arab", "Kharab")


# ==================== Sentence Words ====================
ZERO = "Zero"
AND = "And"
ONLY = "Only"

DEFAULT_FRACTIONAL_FACTOR = 100
