"""Tests for meal pricing and plan totals."""

import pytest

from tiffin_planner.domain.plans import WEEKDAYS, DayPlan, MealSelection
from tiffin_planner.services.pricing import PricingTable, compute_total


def test_price_per_selection(pricing: PricingTable) -> None:
    assert pricing.price(MealSelection.NONE) == 0
    assert pricing.price(MealSelection.HALF) == 50
    assert pricing.price(MealSelection.FULL) == 65


def test_all_none_plan_costs_nothing(pricing: PricingTable) -> None:
    days = {day: DayPlan() for day in WEEKDAYS}

    assert compute_total(days, pricing) == 0


def test_all_full_plan(pricing: PricingTable) -> None:
    days = {day: DayPlan(MealSelection.FULL, MealSelection.FULL) for day in WEEKDAYS}

    assert compute_total(days, pricing) == 6 * 2 * 65 == 780


def test_mixed_plan_sums_lunch_and_dinner(pricing: PricingTable) -> None:
    days = {
        "mon": DayPlan(lunch=MealSelection.FULL, dinner=MealSelection.HALF),
        "wed": DayPlan(lunch=MealSelection.HALF),
        "sat": DayPlan(dinner=MealSelection.FULL),
    }

    assert compute_total(days, pricing) == 65 + 50 + 50 + 65


def test_missing_days_count_as_none(pricing: PricingTable) -> None:
    assert compute_total({}, pricing) == 0
    assert compute_total(None, pricing) == 0


def test_custom_prices_apply_without_globals() -> None:
    days = {"tue": DayPlan(lunch=MealSelection.HALF, dinner=MealSelection.FULL)}

    assert compute_total(days, PricingTable(half_price=40, full_price=70)) == 110


def test_unknown_selection_is_a_contract_violation(pricing: PricingTable) -> None:
    with pytest.raises(ValueError, match="large"):
        compute_total({"mon": {"lunch": "large"}}, pricing)  # type: ignore[dict-item]


def test_day_that_is_not_a_plan_is_a_contract_violation(
    pricing: PricingTable,
) -> None:
    with pytest.raises(ValueError, match="not a day plan"):
        compute_total({"mon": "full"}, pricing)  # type: ignore[dict-item]
