"""Domain models for weekly meal plans."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID

from tiffin_planner.domain.errors import ValidationError
from tiffin_planner.domain.models import UserRecord

WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat")
SLOTS = ("lunch", "dinner")


class MealSelection(StrEnum):
    """Portion chosen for a single meal."""

    NONE = "none"
    HALF = "half"
    FULL = "full"


@dataclass(frozen=True)
class DayPlan:
    """Lunch and dinner selections for one day."""

    lunch: MealSelection = MealSelection.NONE
    dinner: MealSelection = MealSelection.NONE


def _empty_days() -> dict[str, DayPlan]:
    return {day: DayPlan() for day in WEEKDAYS}


@dataclass(frozen=True)
class WeekPlan:
    """One user's plan for the week starting on ``week_start``."""

    owner_id: UUID
    week_start: str
    days: dict[str, DayPlan] = field(default_factory=_empty_days)
    id: UUID | None = None


@dataclass(frozen=True)
class PricedPlan:
    """A plan together with its total computed for this request."""

    plan: WeekPlan
    total: int


@dataclass(frozen=True)
class MemberPlan:
    """A roster member's plan for a week."""

    user: UserRecord
    plan: WeekPlan
    total: int


@dataclass(frozen=True)
class WeekSummary:
    """Group view of every roster member for a week."""

    week_start: str
    members: list[MemberPlan]
    group_total: int


def _slot_value(day_value: object, slot: str) -> object:
    if isinstance(day_value, DayPlan):
        return getattr(day_value, slot)
    if isinstance(day_value, Mapping):
        return day_value.get(slot)
    raise ValueError(f"Day value is not a day plan: {day_value!r}")


def normalize_days(days: Mapping[str, object] | None) -> dict[str, dict[str, object]]:
    """Return all six weekdays with both slots, filling gaps with ``none``.

    A day may be a ``DayPlan`` or a raw mapping. Absent, null and empty slot
    values become ``none``; anything else is passed through untouched so that
    validation can reject it. Keys outside Monday to Saturday are dropped.
    A day that is neither raises ``ValueError``.
    """
    source = days or {}
    normalized: dict[str, dict[str, object]] = {}
    for day in WEEKDAYS:
        day_value = source.get(day)
        if day_value is None:
            normalized[day] = {slot: MealSelection.NONE.value for slot in SLOTS}
            continue
        slots: dict[str, object] = {}
        for slot in SLOTS:
            value = _slot_value(day_value, slot)
            slots[slot] = MealSelection.NONE.value if value in (None, "") else value
        normalized[day] = slots
    return normalized


def parse_days(days: Mapping[str, object] | None) -> dict[str, DayPlan]:
    """Normalize and validate raw day input into ``DayPlan`` values."""
    if days is not None and not isinstance(days, Mapping):
        raise ValidationError("days must be an object")
    for day in WEEKDAYS:
        day_value = (days or {}).get(day)
        if day_value is not None and not isinstance(day_value, Mapping | DayPlan):
            raise ValidationError(f"invalid value for {day}", day=day)

    parsed: dict[str, DayPlan] = {}
    for day, slots in normalize_days(days).items():
        selections: dict[str, MealSelection] = {}
        for slot, value in slots.items():
            try:
                selections[slot] = MealSelection(value)
            except (TypeError, ValueError):
                raise ValidationError(
                    f"invalid {slot} value for {day}", day=day, slot=slot
                ) from None
        parsed[day] = DayPlan(**selections)
    return parsed


def days_to_dict(days: Mapping[str, DayPlan]) -> dict[str, dict[str, str]]:
    """Serialize days into the stored/wire record shape."""
    return {
        day: {slot: str(value) for slot, value in slots.items()}
        for day, slots in normalize_days(days).items()
    }
