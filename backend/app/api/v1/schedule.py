"""
Scheduling and completion endpoints.
"""

from uuid import UUID
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, Query, status
from pydantic import Field
from sqlalchemy.orm import Session

from app.api.v1.base import CamelModel
from app.api.v1.workouts import WorkoutPlanResponse
from app.db.database import get_db
from app.services.completion_service import CompletionService
from app.services.schedule_service import ScheduleService
from app.utils.auth import get_current_user_id

router = APIRouter()


class ScheduleWorkoutRequest(CamelModel):
    """Request model for scheduling a plan."""

    workout_plan_id: UUID
    scheduled_for: datetime


class ExerciseResultInput(CamelModel):
    """What was actually performed for one exercise."""

    exercise_id: UUID
    sets: int = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    weight: Optional[float] = Field(None, ge=0)
    duration: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class CompleteWorkoutRequest(CamelModel):
    """Request model for completing a scheduled workout."""

    scheduled_workout_id: UUID
    notes: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5, description="Rating 1-5")
    duration: Optional[int] = Field(None, ge=0, description="Duration in minutes")
    exercise_results: List[ExerciseResultInput] = Field(default_factory=list)


class ExerciseResultResponse(CamelModel):
    id: UUID
    completed_workout_id: UUID
    exercise_id: UUID
    sets: int
    reps: int
    weight: Optional[float]
    duration: Optional[int]
    notes: Optional[str]


class CompletedWorkoutResponse(CamelModel):
    """Completed workout with its exercise results."""

    id: UUID
    scheduled_workout_id: UUID
    user_id: UUID
    notes: Optional[str]
    rating: Optional[int]
    duration: Optional[int]
    completed_at: datetime
    exercise_results: List[ExerciseResultResponse] = []


class ScheduledWorkoutResponse(CamelModel):
    """Scheduled workout with its plan and, once done, its completion."""

    id: UUID
    workout_plan_id: UUID
    user_id: UUID
    scheduled_for: datetime
    completed: bool
    workout_plan: WorkoutPlanResponse
    completed_workout: Optional[CompletedWorkoutResponse] = None


class PlanSummaryResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str]


class ScheduledWorkoutSummaryResponse(CamelModel):
    id: UUID
    scheduled_for: datetime
    workout_plan: PlanSummaryResponse


class CompletedWorkoutDetailResponse(CompletedWorkoutResponse):
    """Completed workout including the schedule entry and plan it came from."""

    scheduled_workout: ScheduledWorkoutSummaryResponse


@router.post(
    "/schedule",
    response_model=ScheduledWorkoutResponse,
    status_code=status.HTTP_201_CREATED,
)
async def schedule_workout(
    request: ScheduleWorkoutRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Schedule one of the current user's plans."""
    return ScheduleService(db).schedule_workout(
        user_id=current_user_id,
        plan_id=request.workout_plan_id,
        scheduled_for=request.scheduled_for,
    )


@router.get(
    "/schedule",
    response_model=List[ScheduledWorkoutResponse],
    status_code=status.HTTP_200_OK,
)
async def get_scheduled_workouts(
    completed: bool = Query(False, description="Return completed (true) or pending (false) workouts"),
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get scheduled workouts in the given completion state, earliest first."""
    return ScheduleService(db).list_scheduled(current_user_id, completed)


@router.post(
    "/schedule/complete",
    response_model=CompletedWorkoutResponse,
    status_code=status.HTTP_200_OK,
)
async def complete_workout(
    request: CompleteWorkoutRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Mark a scheduled workout as completed and record exercise results.

    All writes happen in one transaction. A second completion of the same
    scheduled workout is rejected with 400.
    """
    return CompletionService(db).complete_workout(
        user_id=current_user_id,
        scheduled_workout_id=request.scheduled_workout_id,
        notes=request.notes,
        rating=request.rating,
        duration=request.duration,
        exercise_results=[r.model_dump() for r in request.exercise_results],
    )


@router.get(
    "/schedule/completed",
    response_model=List[CompletedWorkoutDetailResponse],
    status_code=status.HTTP_200_OK,
)
async def get_completed_workouts(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get the current user's completed workouts, most recent first."""
    return CompletionService(db).list_completed(current_user_id)
