"""
models/exercise.py - Exercise catalog entries
"""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from config.database import Base, utcnow

if TYPE_CHECKING:
    from models.workout_exercise import WorkoutExercise


class Exercise(Base):
    """
    A catalog entry. Only admins create, edit or delete them; anyone can read them.
    Workout exercises reference (never own) an entry.
    """
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Free-form tags
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    equipment: Mapped[str | None] = mapped_column(String(200), nullable=True)

    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Plan rows belong to their workout; an entry still referenced cannot be deleted
    workout_exercises: Mapped[List["WorkoutExercise"]] = relationship(
        back_populates="exercise",
        passive_deletes="all",
    )
