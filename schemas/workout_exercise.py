# schemas/workout_exercise.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import NotNull, RawId
from schemas.exercise import ExerciseSummary

DayNumber = Annotated[int, Field(ge=1)]
Sets = Annotated[int, Field(ge=1, le=100)]
Reps = Annotated[int, Field(ge=1, le=1000)]
RestSeconds = Annotated[int, Field(ge=0, le=3600)]


class WorkoutExerciseCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    workout_id: RawId = Field(..., alias="workoutId")
    day_number: DayNumber = Field(..., alias="dayNumber")
    workout_name: Optional[str] = Field(None, alias="workoutName", max_length=100)
    exercise_id: RawId = Field(..., alias="exerciseId")
    sets: Sets = 3
    reps: Reps = 10
    rest_seconds: RestSeconds = Field(60, alias="restSeconds")


class WorkoutExerciseUpdate(BaseModel):
    """Partial update; the parent workout is fixed once the row exists."""
    model_config = ConfigDict(populate_by_name=True)

    workout_name: Optional[str] = Field(None, alias="workoutName", max_length=100)
    day_number: Annotated[Optional[DayNumber], NotNull] = Field(None, alias="dayNumber")
    exercise_id: Annotated[Optional[RawId], NotNull] = Field(None, alias="exerciseId")
    sets: Annotated[Optional[Sets], NotNull] = None
    reps: Annotated[Optional[Reps], NotNull] = None
    rest_seconds: Annotated[Optional[RestSeconds], NotNull] = Field(None, alias="restSeconds")


class WorkoutExerciseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    workout_id: int = Field(alias="workout")
    day_number: int = Field(alias="dayNumber")
    workout_name: Optional[str] = Field(None, alias="workoutName")
    exercise: ExerciseSummary
    sets: int
    reps: int
    rest_seconds: int = Field(alias="restSeconds")
    created_at: datetime
    updated_at: datetime
