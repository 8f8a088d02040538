# routers/workouts.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from models.user import User
from schemas.common import MessageOut
from schemas.workout import WorkoutCreate, WorkoutOut, WorkoutUpdate
from services.workout_service import (
    create_workout,
    delete_workout,
    get_owned_workout,
    list_workouts,
    update_workout,
)
from utils.dependencies import get_current_user, get_db

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("", response_model=List[WorkoutOut])
def list_(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Workouts of the logged in user."""
    return [WorkoutOut.model_validate(w) for w in list_workouts(db, user)]


@router.get("/{workout_id}", response_model=WorkoutOut)
def get_(workout_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return WorkoutOut.model_validate(get_owned_workout(db, workout_id, user))


@router.post("", response_model=WorkoutOut, status_code=status.HTTP_201_CREATED)
def create(body: WorkoutCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return WorkoutOut.model_validate(create_workout(db, user, body))


@router.put("/{workout_id}", response_model=WorkoutOut)
def update(
    workout_id: str,
    body: WorkoutUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return WorkoutOut.model_validate(update_workout(db, user, workout_id, body))


@router.delete("/{workout_id}", response_model=MessageOut)
def delete(workout_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Also removes every exercise planned in the workout."""
    delete_workout(db, user, workout_id)
    return MessageOut(message="Workout removed")
