"""
models/workout_exercise.py - One catalog exercise placed on a day of a workout
"""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base, utcnow

if TYPE_CHECKING:
    from models.exercise import Exercise


class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"
    __table_args__ = (
        CheckConstraint("day_number >= 1", name="ck_day_number_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # No owner column: access is decided by the parent workout's owner
    workout_id: Mapped[int] = mapped_column(Integer, ForeignKey("workouts.id"), nullable=False, index=True)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    workout_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    exercise_id: Mapped[int] = mapped_column(Integer, ForeignKey("exercises.id"), nullable=False, index=True)

    sets: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    rest_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=60)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Catalog fields are joined into every response
    exercise: Mapped["Exercise"] = relationship(back_populates="workout_exercises", lazy="joined")
