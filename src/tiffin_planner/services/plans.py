"""Weekly plan upsert and aggregation."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from tiffin_planner.domain.errors import ConflictError, StorageError, ValidationError
from tiffin_planner.domain.plans import (
    DayPlan,
    MemberPlan,
    PricedPlan,
    WeekPlan,
    WeekSummary,
    parse_days,
)
from tiffin_planner.services.pricing import PricingTable, compute_total
from tiffin_planner.services.users import UserService

_logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Persistence interface for week plans keyed by (owner, week start)."""

    def get_plan(self, owner_id: UUID, week_start: str) -> WeekPlan | None:
        """Return the owner's plan for the week, if present."""

    def list_plans(self, week_start: str) -> list[WeekPlan]:
        """Return every plan for the week."""

    def create_plan(
        self, owner_id: UUID, week_start: str, days: dict[str, DayPlan]
    ) -> WeekPlan:
        """Insert a plan; raise ``ConflictError`` if the key already exists."""

    def replace_days(
        self, owner_id: UUID, week_start: str, days: dict[str, DayPlan]
    ) -> WeekPlan | None:
        """Overwrite the days of an existing plan and return it."""


@dataclass
class PlanService:
    """Service for saving, pricing and aggregating week plans."""

    repository: PlanRepository
    user_service: UserService
    pricing: PricingTable
    member_ids: set[UUID] | None = None

    def get_plan(self, owner_id: UUID, week_start: str) -> PricedPlan:
        """Return the owner's plan, or an empty unsaved plan when none exists."""
        plan = self.repository.get_plan(owner_id, week_start)
        if plan is None:
            plan = WeekPlan(owner_id=owner_id, week_start=week_start)
        return self._price(plan)

    def save_plan(
        self,
        owner_id: UUID,
        week_start: str | None,
        days: Mapping[str, object] | None,
    ) -> PricedPlan:
        """Create or fully replace the owner's plan for the week."""
        if not week_start or not week_start.strip():
            raise ValidationError("missing week start")
        parsed = parse_days(days)

        existing = self.repository.get_plan(owner_id, week_start)
        if existing is None:
            try:
                plan = self.repository.create_plan(owner_id, week_start, parsed)
            except ConflictError:
                _logger.info(
                    "Plan created concurrently, replacing: owner=%s week=%s",
                    owner_id,
                    week_start,
                )
                plan = self._replace(owner_id, week_start, parsed)
        else:
            plan = self._replace(owner_id, week_start, parsed)
        return self._price(plan)

    def list_week_plans(self, week_start: str) -> list[MemberPlan]:
        """Return every roster member's plan and total for the week."""
        users = self.user_service.list_users(self.member_ids)
        plans = {
            plan.owner_id: plan for plan in self.repository.list_plans(week_start)
        }
        members = []
        for user in users:
            plan = plans.get(user.id)
            if plan is None:
                plan = WeekPlan(owner_id=user.id, week_start=week_start)
            members.append(
                MemberPlan(
                    user=user, plan=plan, total=compute_total(plan.days, self.pricing)
                )
            )
        return members

    def summarize_week(self, week_start: str) -> WeekSummary:
        """Return the roster view together with the group total."""
        members = self.list_week_plans(week_start)
        return WeekSummary(
            week_start=week_start,
            members=members,
            group_total=sum(member.total for member in members),
        )

    def _replace(
        self, owner_id: UUID, week_start: str, days: dict[str, DayPlan]
    ) -> WeekPlan:
        plan = self.repository.replace_days(owner_id, week_start, days)
        if plan is None:
            raise StorageError("Plan disappeared during update")
        return plan

    def _price(self, plan: WeekPlan) -> PricedPlan:
        return PricedPlan(plan=plan, total=compute_total(plan.days, self.pricing))
