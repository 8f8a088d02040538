# schemas/workout.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from schemas.common import NotNull


def _check_plan_name(value: str) -> str:
    if not value.strip():
        raise ValueError("Plan name is required")
    return value


PlanName = Annotated[str, Field(max_length=100), AfterValidator(_check_plan_name)]
PerWeek = Annotated[int, Field(ge=1, le=7)]


class WorkoutCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plan_name: PlanName = Field(..., alias="planName")
    goal: Optional[str] = Field(None, max_length=50)
    level: Optional[str] = Field(None, max_length=20)
    duration_weeks: Optional[int] = Field(None, alias="durationWeeks", ge=1)
    workouts_per_week: PerWeek = Field(3, alias="workoutsPerWeek")


class WorkoutUpdate(BaseModel):
    """
    Partial update. The owner is not part of the schema, so it can never be
    changed through this path.
    """
    model_config = ConfigDict(populate_by_name=True)

    plan_name: Annotated[Optional[PlanName], NotNull] = Field(None, alias="planName")
    goal: Optional[str] = Field(None, max_length=50)
    level: Optional[str] = Field(None, max_length=20)
    duration_weeks: Optional[int] = Field(None, alias="durationWeeks", ge=1)
    workouts_per_week: Annotated[Optional[PerWeek], NotNull] = Field(None, alias="workoutsPerWeek")


class WorkoutOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: int = Field(alias="user")
    plan_name: str = Field(alias="planName")
    goal: Optional[str] = None
    level: Optional[str] = None
    duration_weeks: Optional[int] = Field(None, alias="durationWeeks")
    workouts_per_week: int = Field(alias="workoutsPerWeek")
    created_at: datetime
    updated_at: datetime
