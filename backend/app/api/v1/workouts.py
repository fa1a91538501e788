"""
Workout plan endpoints.
"""

from uuid import UUID
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, status
from pydantic import Field
from sqlalchemy.orm import Session

from app.api.v1.base import CamelModel
from app.api.v1.exercises import ExerciseResponse
from app.db.database import get_db
from app.services.plan_service import PlanService
from app.utils.auth import get_current_user_id

router = APIRouter()


class WorkoutExerciseInput(CamelModel):
    """One prescribed exercise in a plan request."""

    exercise_id: UUID
    sets: int = Field(..., gt=0, description="Prescribed sets")
    reps: int = Field(..., gt=0, description="Prescribed reps per set")
    weight: Optional[float] = Field(None, ge=0, description="Weight in kg")
    duration: Optional[int] = Field(None, ge=0, description="Duration in seconds")
    notes: Optional[str] = None


class WorkoutPlanRequest(CamelModel):
    """Request model for creating or replacing a plan."""

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    exercises: List[WorkoutExerciseInput] = Field(default_factory=list)


class WorkoutExerciseResponse(CamelModel):
    """Prescribed exercise with its catalog entry."""

    id: UUID
    workout_plan_id: UUID
    exercise_id: UUID
    position: int
    sets: int
    reps: int
    weight: Optional[float]
    duration: Optional[int]
    notes: Optional[str]
    exercise: ExerciseResponse


class WorkoutPlanResponse(CamelModel):
    """Response model for a plan."""

    id: UUID
    user_id: UUID
    name: str
    description: Optional[str]
    created_at: datetime
    workout_exercises: List[WorkoutExerciseResponse] = []


class MessageResponse(CamelModel):
    message: str


@router.post(
    "/workouts",
    response_model=WorkoutPlanResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_workout_plan(
    request: WorkoutPlanRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Create a workout plan with its exercises.

    Requires authentication.
    """
    return PlanService(db).create_plan(
        user_id=current_user_id,
        name=request.name,
        description=request.description,
        exercises=[e.model_dump() for e in request.exercises],
    )


@router.get(
    "/workouts",
    response_model=List[WorkoutPlanResponse],
    status_code=status.HTTP_200_OK,
)
async def get_workout_plans(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get the current user's plans, newest first."""
    return PlanService(db).list_plans(current_user_id)


@router.get(
    "/workouts/{plan_id}",
    response_model=WorkoutPlanResponse,
    status_code=status.HTTP_200_OK,
)
async def get_workout_plan(
    plan_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get one of the current user's plans."""
    return PlanService(db).get_plan(current_user_id, plan_id)


@router.put(
    "/workouts/{plan_id}",
    response_model=WorkoutPlanResponse,
    status_code=status.HTTP_200_OK,
)
async def update_workout_plan(
    plan_id: UUID,
    request: WorkoutPlanRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Replace a plan's name, description and exercise list.

    The exercise list is replaced wholesale: prescription ids change on
    every update.
    """
    return PlanService(db).update_plan(
        user_id=current_user_id,
        plan_id=plan_id,
        name=request.name,
        description=request.description,
        exercises=[e.model_dump() for e in request.exercises],
    )


@router.delete(
    "/workouts/{plan_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_workout_plan(
    plan_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Delete a plan and everything scheduled from it."""
    PlanService(db).delete_plan(current_user_id, plan_id)
    return MessageResponse(message="Workout plan deleted successfully")
