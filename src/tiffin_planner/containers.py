"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from tiffin_planner.adapters.supabase_plan_repository import SupabasePlanRepository
from tiffin_planner.adapters.supabase_user_repository import SupabaseUserRepository
from tiffin_planner.config import Settings, parse_member_ids
from tiffin_planner.services.auth import PasswordHasher, TokenService
from tiffin_planner.services.plans import PlanService
from tiffin_planner.services.pricing import PricingTable
from tiffin_planner.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    plan_service: PlanService
    token_service: TokenService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(
        repository=SupabaseUserRepository(supabase_client),
        hasher=PasswordHasher(rounds=resolved_settings.password_hash_rounds),
    )
    plan_service = PlanService(
        repository=SupabasePlanRepository(supabase_client),
        user_service=user_service,
        pricing=PricingTable(
            half_price=resolved_settings.half_price,
            full_price=resolved_settings.full_price,
        ),
        member_ids=parse_member_ids(resolved_settings.group_member_ids),
    )
    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        algorithm=resolved_settings.jwt_algorithm,
        ttl=timedelta(days=resolved_settings.token_ttl_days),
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        plan_service=plan_service,
        token_service=token_service,
    )
