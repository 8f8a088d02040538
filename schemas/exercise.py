# schemas/exercise.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter

from schemas.common import NotNull

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: Optional[str]) -> Optional[str]:
    # stored exactly as sent; "" clears the media reference
    if value:
        try:
            _http_url.validate_python(value)
        except ValueError:
            raise ValueError("Invalid URL") from None
    return value


def _check_name(value: str) -> str:
    if not value.strip():
        raise ValueError("Exercise name is required")
    return value


MediaUrl = Annotated[Optional[str], Field(max_length=500), AfterValidator(_check_url)]
ExerciseName = Annotated[str, Field(max_length=255), AfterValidator(_check_name)]


class ExerciseCreate(BaseModel):
    name: ExerciseName
    category: Optional[str] = Field(None, max_length=100)
    equipment: Optional[str] = Field(None, max_length=200)
    instructions: Optional[str] = None
    video_url: MediaUrl = None
    image_url: MediaUrl = None


class ExerciseUpdate(BaseModel):
    name: Annotated[Optional[ExerciseName], NotNull] = None
    category: Optional[str] = Field(None, max_length=100)
    equipment: Optional[str] = Field(None, max_length=200)
    instructions: Optional[str] = None
    video_url: MediaUrl = None
    image_url: MediaUrl = None


class ExerciseSummary(BaseModel):
    """Catalog fields embedded in workout exercise responses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: Optional[str] = None
    equipment: Optional[str] = None
    instructions: Optional[str] = None
    video_url: Optional[str] = None
    image_url: Optional[str] = None


class ExerciseOut(ExerciseSummary):
    created_at: datetime
    updated_at: datetime
