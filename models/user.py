# models/user.py
from __future__ import annotations

import enum
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from config.database import Base, utcnow
from utils.security import hash_password, verify_password


class GenderEnum(str, enum.Enum):
    male = "male"
    female = "female"
    other = "other"
    unspecified = "unspecified"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(150), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(150), nullable=False)

    gender: Mapped[GenderEnum] = mapped_column(
        SAEnum(GenderEnum, name="genderenum", native_enum=False, validate_strings=True),
        nullable=False,
        default=GenderEnum.unspecified,
    )
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    height_cm: Mapped[float | None] = mapped_column(Float, nullable=True)
    weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)

    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def set_password(self, raw: str) -> None:
        # the only writer of password_hash; whatever the caller passes is hashed
        self.password_hash = hash_password(raw)

    def check_password(self, raw: str) -> bool:
        return verify_password(raw, self.password_hash)
