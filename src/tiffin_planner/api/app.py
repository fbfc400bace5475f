"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tiffin_planner.api.auth import require_owner
from tiffin_planner.api.plan_models import LoginRequest, RegisterRequest, SavePlanRequest
from tiffin_planner.app_logging import configure_logging
from tiffin_planner.containers import AppContainer
from tiffin_planner.domain.errors import (
    AuthenticationError,
    StorageError,
    ValidationError,
)
from tiffin_planner.domain.models import UserRecord
from tiffin_planner.domain.plans import MemberPlan, PricedPlan, WeekPlan, days_to_dict
from tiffin_planner.services.weeks import current_week_start

# Roughly ten years either side of the current week.
MAX_WEEK_OFFSET = 520


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Tiffin Planner")
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        missing = any(error.get("type") == "missing" for error in exc.errors())
        message = "missing fields" if missing else "invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(
        _request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        return JSONResponse(status_code=401, content={"error": str(exc)})

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage failure on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "server error"})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/auth/register")
    def register(body: RegisterRequest, request: Request) -> dict[str, object]:
        """Create an account and return an access token."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.register(
            name=body.name, email=body.email, password=body.password
        )
        logger.info("Registered user %s", user.id)
        return {
            "token": state_container.token_service.issue(user),
            "user": _serialize_user(user),
        }

    @app.post("/api/auth/login")
    def login(body: LoginRequest, request: Request) -> dict[str, object]:
        """Verify credentials and return an access token."""
        state_container: AppContainer = request.app.state.container
        user = state_container.user_service.authenticate(body.email, body.password)
        return {
            "token": state_container.token_service.issue(user),
            "user": _serialize_user(user),
        }

    @app.get("/api/users")
    def list_users(
        request: Request, _owner_id: UUID = Depends(require_owner)
    ) -> list[dict[str, object]]:
        """Return every registered user."""
        state_container: AppContainer = request.app.state.container
        return [
            _serialize_user(user)
            for user in state_container.user_service.list_users()
        ]

    @app.get("/api/weeks/current")
    def current_week(
        request: Request,
        offset: int = Query(default=0, ge=-MAX_WEEK_OFFSET, le=MAX_WEEK_OFFSET),
        _owner_id: UUID = Depends(require_owner),
    ) -> dict[str, str]:
        """Return the Monday of the current week shifted by ``offset`` weeks."""
        state_container: AppContainer = request.app.state.container
        week_start = current_week_start(
            state_container.settings.planner_timezone, offset_weeks=offset
        )
        return {"weekStart": week_start}

    @app.get("/api/plans/mine/{week_start}")
    def my_plan(
        week_start: str,
        request: Request,
        owner_id: UUID = Depends(require_owner),
    ) -> dict[str, object]:
        """Return the caller's plan and total for the week."""
        state_container: AppContainer = request.app.state.container
        priced = state_container.plan_service.get_plan(owner_id, week_start)
        return _serialize_priced_plan(priced)

    @app.post("/api/plans")
    def save_plan(
        body: SavePlanRequest,
        request: Request,
        owner_id: UUID = Depends(require_owner),
    ) -> dict[str, object]:
        """Create or replace the caller's plan for a week."""
        state_container: AppContainer = request.app.state.container
        priced = state_container.plan_service.save_plan(
            owner_id, body.week_start, body.days
        )
        logger.info(
            "Saved plan: owner=%s week=%s total=%s",
            owner_id,
            priced.plan.week_start,
            priced.total,
        )
        return _serialize_priced_plan(priced)

    @app.get("/api/plans/week/{week_start}")
    def week_plans(
        week_start: str,
        request: Request,
        _owner_id: UUID = Depends(require_owner),
    ) -> list[dict[str, object]]:
        """Return every group member's plan and total for the week."""
        state_container: AppContainer = request.app.state.container
        members = state_container.plan_service.list_week_plans(week_start)
        return [_serialize_member(member) for member in members]

    @app.get("/api/plans/summary/{week_start}")
    def week_summary(
        week_start: str,
        request: Request,
        _owner_id: UUID = Depends(require_owner),
    ) -> dict[str, object]:
        """Return per-member totals and the group total for the week."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.plan_service.summarize_week(week_start)
        return {
            "weekStart": summary.week_start,
            "members": [_serialize_member(member) for member in summary.members],
            "groupTotal": summary.group_total,
        }

    return app


def _serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": str(user.id), "name": user.name, "email": user.email}


def _serialize_plan(plan: WeekPlan) -> dict[str, object]:
    return {
        "id": str(plan.id) if plan.id else None,
        "user": str(plan.owner_id),
        "weekStart": plan.week_start,
        "days": days_to_dict(plan.days),
    }


def _serialize_priced_plan(priced: PricedPlan) -> dict[str, object]:
    return {"plan": _serialize_plan(priced.plan), "total": priced.total}


def _serialize_member(member: MemberPlan) -> dict[str, object]:
    return {
        "id": str(member.plan.id) if member.plan.id else None,
        "user": _serialize_user(member.user),
        "days": days_to_dict(member.plan.days),
        "total": member.total,
    }
