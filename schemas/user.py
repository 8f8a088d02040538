# schemas/user.py
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field

from models.user import GenderEnum
from schemas.common import NotNull

MIN_PASSWORD_LENGTH = 6


def _blank_gender(value):
    # older clients send "" for "not given"
    if value == "":
        return GenderEnum.unspecified
    return value


def _check_password_strength(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return value


def _strip_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Full name is required")
    return value


Password = Annotated[str, AfterValidator(_check_password_strength)]
FullName = Annotated[str, Field(min_length=1, max_length=150), AfterValidator(_strip_name)]
Gender = Annotated[GenderEnum, BeforeValidator(_blank_gender)]
HeightCm = Annotated[float, Field(gt=0, le=300)]
WeightKg = Annotated[float, Field(gt=0, le=700)]


class UserRegister(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: Password
    full_name: FullName = Field(..., alias="fullName")
    gender: Gender = GenderEnum.unspecified
    birth_date: Optional[date] = Field(None, alias="birthDate")
    height_cm: Optional[HeightCm] = Field(None, alias="heightCm")
    weight_kg: Optional[WeightKg] = Field(None, alias="weightKg")


class LoginIn(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ProfileUpdate(BaseModel):
    """Only the fields present in the body are written."""
    model_config = ConfigDict(populate_by_name=True)

    full_name: Annotated[Optional[FullName], NotNull] = Field(None, alias="fullName")
    gender: Annotated[Optional[Gender], NotNull] = None
    birth_date: Optional[date] = Field(None, alias="birthDate")
    height_cm: Optional[HeightCm] = Field(None, alias="heightCm")
    weight_kg: Optional[WeightKg] = Field(None, alias="weightKg")


class PasswordChange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(..., alias="currentPassword", min_length=1)
    new_password: Password = Field(..., alias="newPassword")


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    email: str
    full_name: str = Field(alias="fullName")
    gender: GenderEnum
    birth_date: Optional[date] = Field(None, alias="birthDate")
    height_cm: Optional[float] = Field(None, alias="heightCm")
    weight_kg: Optional[float] = Field(None, alias="weightKg")
    is_admin: bool = Field(False, alias="isAdmin")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class UserEnvelope(BaseModel):
    user: UserOut
    message: str
