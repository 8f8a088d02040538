# routers/exercises.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from models.user import User
from schemas.common import MessageOut
from schemas.exercise import ExerciseCreate, ExerciseOut, ExerciseUpdate
from services.exercise_service import (
    create_exercise,
    delete_exercise,
    get_exercise,
    list_exercises,
    update_exercise,
)
from utils.dependencies import get_db, require_admin

router = APIRouter(prefix="/exercises", tags=["exercises"])


# -------- Public reads --------
@router.get("", response_model=List[ExerciseOut])
def list_(db: Session = Depends(get_db)):
    return [ExerciseOut.model_validate(e) for e in list_exercises(db)]


@router.get("/{exercise_id}", response_model=ExerciseOut)
def get_(exercise_id: str, db: Session = Depends(get_db)):
    return ExerciseOut.model_validate(get_exercise(db, exercise_id))


# -------- Admin only --------
@router.post("", response_model=ExerciseOut, status_code=status.HTTP_201_CREATED)
def create(body: ExerciseCreate, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    return ExerciseOut.model_validate(create_exercise(db, body))


@router.put("/{exercise_id}", response_model=ExerciseOut)
def update(
    exercise_id: str,
    body: ExerciseUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return ExerciseOut.model_validate(update_exercise(db, exercise_id, body))


@router.delete("/{exercise_id}", response_model=MessageOut)
def delete(exercise_id: str, admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    delete_exercise(db, exercise_id)
    return MessageOut(message="Exercise removed")
