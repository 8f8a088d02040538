# routers/workout_exercises.py
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from models.user import User
from schemas.common import MessageOut
from schemas.workout_exercise import WorkoutExerciseCreate, WorkoutExerciseOut, WorkoutExerciseUpdate
from services.workout_exercise_service import (
    create_workout_exercise,
    delete_all_for_workout,
    delete_workout_exercise,
    list_for_workout,
    update_workout_exercise,
)
from utils.dependencies import get_current_user, get_db

router = APIRouter(prefix="/workout-exercises", tags=["workout-exercises"])


def _out(rows) -> List[WorkoutExerciseOut]:
    return [WorkoutExerciseOut.model_validate(r) for r in rows]


@router.get("/workout/{workout_id}", response_model=List[WorkoutExerciseOut])
def list_by_workout(workout_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return _out(list_for_workout(db, user, workout_id))


@router.get("/workout/{workout_id}/day/{day_number}", response_model=List[WorkoutExerciseOut])
def list_by_day(
    workout_id: str,
    day_number: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return _out(list_for_workout(db, user, workout_id, day_number))


@router.post("", response_model=WorkoutExerciseOut, status_code=status.HTTP_201_CREATED)
def create(body: WorkoutExerciseCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return WorkoutExerciseOut.model_validate(create_workout_exercise(db, user, body))


@router.put("/{workout_exercise_id}", response_model=WorkoutExerciseOut)
def update(
    workout_exercise_id: str,
    body: WorkoutExerciseUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return WorkoutExerciseOut.model_validate(update_workout_exercise(db, user, workout_exercise_id, body))


@router.delete("/workout/{workout_id}", response_model=MessageOut)
def delete_all(workout_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    delete_all_for_workout(db, user, workout_id)
    return MessageOut(message="All workout exercises removed")


@router.delete("/{workout_exercise_id}", response_model=MessageOut)
def delete(workout_exercise_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    delete_workout_exercise(db, user, workout_exercise_id)
    return MessageOut(message="Workout exercise removed")
