# services/scales.py
# Scale systems: scale words plus the grouping rule that decides how many
# digits each group takes. Exposes: INTERNATIONAL, INDIAN, get_scale_system()

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from number_wordify.constants import INDIAN_SCALE, INTERNATIONAL_SCALE
from number_wordify.exceptions import ConfigurationError, UnknownScaleError


@dataclass(frozen=True)
class GroupingRule:
    """Divisor for group 0 is `first_divisor`; every later group uses `divisor`."""

    first_divisor: int = 1000
    divisor: int = 1000

    def __post_init__(self):
        for name in ("first_divisor", "divisor"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 2:
                raise ConfigurationError(
                    f"GroupingRule.{name} must be an integer greater than 1, got {value!r}"
                )
        # Groups are spelled by the three-digit converter
        if self.first_divisor > 1000 or self.divisor > 1000:
            raise ConfigurationError("GroupingRule divisors must not exceed 1000")

    def divisor_for(self, index: int) -> int:
        return self.first_divisor if index == 0 else self.divisor


@dataclass(frozen=True)
class ScaleSystem:
    name: str
    scale_words: Tuple[str, ...]
    grouping: GroupingRule = field(default_factory=GroupingRule)

    def __post_init__(self):
        words = tuple(self.scale_words)
        if not words:
            raise ConfigurationError(f"Scale system '{self.name}' has no scale words")
        if words[0] != "":
            raise ConfigurationError(
                f"Scale system '{self.name}': the first scale word must be empty, got {words[0]!r}"
            )
        object.__setattr__(self, "scale_words", words)

    @property
    def capacity(self) -> int:
        """Smallest amount that would need a group beyond the last scale word."""
        total = 1
        for index in range(len(self.scale_words)):
            total *= self.grouping.divisor_for(index)
        return total

    @property
    def max_amount(self) -> int:
        return self.capacity - 1


INTERNATIONAL = ScaleSystem(
    name="international",
    scale_words=INTERNATIONAL_SCALE,
    grouping=GroupingRule(first_divisor=1000, divisor=1000),
)

INDIAN = ScaleSystem(
    name="indian",
    scale_words=INDIAN_SCALE,
    grouping=GroupingRule(first_divisor=1000, divisor=100),
)

SCALE_SYSTEMS: Dict[str, ScaleSystem] = {
    INTERNATIONAL.name: INTERNATIONAL,
    INDIAN.name: INDIAN,
}


def get_scale_system(scale: Union[str, ScaleSystem, None]) -> ScaleSystem:
    """Resolve a preset name (case-insensitive) or pass a ScaleSystem through."""
    if isinstance(scale, ScaleSystem):
        return scale
    if scale is None:
        return INTERNATIONAL

    key = str(scale).strip().lower()
    try:
        return SCALE_SYSTEMS[key]
    except KeyError:
        raise UnknownScaleError(key) from None
