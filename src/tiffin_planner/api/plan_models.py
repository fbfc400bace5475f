"""Pydantic models for planner request bodies."""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Account registration payload."""

    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """Login payload."""

    email: str
    password: str


class SavePlanRequest(BaseModel):
    """Plan save payload; day values are validated by the plan service."""

    model_config = ConfigDict(populate_by_name=True)

    week_start: str | None = Field(default=None, alias="weekStart")
    days: dict[str, object] | None = None
