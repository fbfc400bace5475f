"""Meal pricing and plan totals."""

from collections.abc import Mapping
from dataclasses import dataclass

from tiffin_planner.domain.plans import DayPlan, MealSelection, normalize_days

DEFAULT_HALF_PRICE = 50
DEFAULT_FULL_PRICE = 65


@dataclass(frozen=True)
class PricingTable:
    """Price per meal selection, in whole currency units."""

    half_price: int = DEFAULT_HALF_PRICE
    full_price: int = DEFAULT_FULL_PRICE

    def price(self, selection: MealSelection | str) -> int:
        """Return the price of a single meal selection."""
        try:
            resolved = MealSelection(selection)
        except (TypeError, ValueError):
            raise ValueError(f"Unpriced meal selection: {selection!r}") from None
        if resolved is MealSelection.HALF:
            return self.half_price
        if resolved is MealSelection.FULL:
            return self.full_price
        return 0


def compute_total(days: Mapping[str, DayPlan] | None, pricing: PricingTable) -> int:
    """Sum lunch and dinner prices over Monday to Saturday.

    Missing days count as no meals. Values that are not meal selections raise
    ``ValueError``; input must be validated with ``parse_days`` beforehand.
    """
    total = 0
    for slots in normalize_days(days).values():
        total += pricing.price(slots["lunch"]) + pricing.price(slots["dinner"])
    return total
