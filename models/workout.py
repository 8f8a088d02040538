# models/workout.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from config.database import Base, utcnow


class Workout(Base):
    """A named plan owned by exactly one user."""
    __tablename__ = "workouts"
    __table_args__ = (
        CheckConstraint("workouts_per_week BETWEEN 1 AND 7", name="ck_workouts_per_week"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Owner; set on creation and never updated
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    plan_name: Mapped[str] = mapped_column(String(100), nullable=False)
    goal: Mapped[str | None] = mapped_column(String(50), nullable=True)
    level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    duration_weeks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    workouts_per_week: Mapped[int] = mapped_column(Integer, nullable=False, default=3)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
