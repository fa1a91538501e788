"""
Workout report endpoints.
"""

from uuid import UUID
from typing import List, Optional, Union
from datetime import date, datetime
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.v1.base import CamelModel
from app.db.database import get_db
from app.services.report_service import ReportService
from app.utils.auth import get_current_user_id

router = APIRouter()


class ExerciseStatsResponse(CamelModel):
    total_sets: int
    total_reps: int
    total_weight: float
    total_duration: int
    count: int


class ExerciseDetailResponse(CamelModel):
    id: UUID
    name: str
    category: str
    muscle_group: Optional[str]
    stats: ExerciseStatsResponse


class WorkoutEntryResponse(CamelModel):
    id: UUID
    completed_at: datetime
    duration: Optional[int]
    rating: Optional[int]
    workout_plan_name: str
    exercise_count: int


class ReportSummaryResponse(CamelModel):
    total_workouts: int
    total_duration: int
    average_rating: float
    start_date: Optional[datetime]
    end_date: Optional[datetime]


class WorkoutReportResponse(CamelModel):
    """Workout report response model."""

    summary: ReportSummaryResponse
    workouts: List[WorkoutEntryResponse]
    exercise_details: List[ExerciseDetailResponse]


@router.get(
    "/reports",
    response_model=WorkoutReportResponse,
    status_code=status.HTTP_200_OK,
)
async def get_workout_report(
    start_date: Optional[Union[datetime, date]] = Query(
        None, alias="startDate", description="Inclusive lower bound on completion time"
    ),
    end_date: Optional[Union[datetime, date]] = Query(
        None, alias="endDate", description="Inclusive upper bound on completion time"
    ),
    category: Optional[str] = Query(None, description="Restrict exercise details to a category"),
    muscle_group: Optional[str] = Query(
        None, alias="muscleGroup", description="Restrict exercise details to a muscle group"
    ),
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Generate a report over the current user's completed workouts.

    The summary covers every completed workout in the date window; the
    category and muscle group filters only narrow exercise details.

    Args:
        start_date: Date or datetime; dates mean midnight UTC
        end_date: Date or datetime; dates mean midnight UTC
        category: Exercise category filter for exercise details
        muscle_group: Muscle group filter for exercise details
        current_user_id: Authenticated user ID from JWT
        db: Database session
    """
    return ReportService(db).generate_report(
        user_id=current_user_id,
        start_date=start_date,
        end_date=end_date,
        category=category,
        muscle_group=muscle_group,
    )
