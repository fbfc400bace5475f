"""Supabase repository for week plans."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from tiffin_planner.adapters.supabase_errors import execute
from tiffin_planner.domain.errors import StorageError, ValidationError
from tiffin_planner.domain.plans import DayPlan, WeekPlan, days_to_dict, parse_days
from tiffin_planner.services.plans import PlanRepository

_COLUMNS = "id, user_id, week_start, days"


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase implementation backed by ``week_plans``.

    The table carries a unique constraint on ``(user_id, week_start)``.
    """

    client: Client

    def get_plan(self, owner_id: UUID, week_start: str) -> WeekPlan | None:
        """Return the owner's plan for the week, if present."""
        response = execute(
            self.client.table("week_plans")
            .select(_COLUMNS)
            .eq("user_id", str(owner_id))
            .eq("week_start", week_start)
            .limit(1),
            "load plan",
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def list_plans(self, week_start: str) -> list[WeekPlan]:
        """Return every plan for the week in a single query."""
        response = execute(
            self.client.table("week_plans")
            .select(_COLUMNS)
            .eq("week_start", week_start),
            "list plans",
        )
        return [_parse_plan(row) for row in response.data or []]

    def create_plan(
        self, owner_id: UUID, week_start: str, days: dict[str, DayPlan]
    ) -> WeekPlan:
        """Insert a plan row and return it."""
        response = execute(
            self.client.table("week_plans").insert(
                {
                    "user_id": str(owner_id),
                    "week_start": week_start,
                    "days": days_to_dict(days),
                }
            ),
            "create plan",
        )
        if not response.data:
            raise StorageError("Failed to create plan")
        return _parse_plan(response.data[0])

    def replace_days(
        self, owner_id: UUID, week_start: str, days: dict[str, DayPlan]
    ) -> WeekPlan | None:
        """Overwrite all days of the plan and return the updated row."""
        response = execute(
            self.client.table("week_plans")
            .update(
                {
                    "days": days_to_dict(days),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("user_id", str(owner_id))
            .eq("week_start", week_start),
            "update plan",
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])


def _parse_plan(row: dict[str, object]) -> WeekPlan:
    raw_days = row.get("days")
    try:
        days = parse_days(raw_days if isinstance(raw_days, dict) else None)
    except ValidationError as exc:
        raise StorageError(f"Stored plan {row.get('id')} is invalid") from exc
    return WeekPlan(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["user_id"])),
        week_start=str(row["week_start"]),
        days=days,
    )
