"""
Exercise catalog endpoints.
"""

from uuid import UUID
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.v1.base import CamelModel
from app.db.database import get_db
from app.services.exercise_service import ExerciseService
from app.utils.auth import get_current_user_id

router = APIRouter(dependencies=[Depends(get_current_user_id)])


class ExerciseResponse(CamelModel):
    """Exercise response model."""

    id: UUID
    name: str
    description: str
    category: str
    muscle_group: Optional[str] = None


@router.get(
    "/exercises",
    response_model=List[ExerciseResponse],
    status_code=status.HTTP_200_OK,
)
async def get_exercises(
    category: Optional[str] = Query(None, description="Filter by category"),
    muscle_group: Optional[str] = Query(
        None, alias="muscleGroup", description="Filter by muscle group"
    ),
    db: Session = Depends(get_db),
):
    """
    Get list of exercises ordered by name, optionally filtered.

    Args:
        category: Optional filter by category (Strength, Cardio, Flexibility)
        muscle_group: Optional filter by muscle group (Chest, Back, Legs, ...)
        db: Database session
    """
    return ExerciseService(db).list_exercises(category, muscle_group)


@router.get(
    "/exercises/categories",
    response_model=List[str],
    status_code=status.HTTP_200_OK,
)
async def get_exercise_categories(db: Session = Depends(get_db)):
    """Get the distinct exercise categories."""
    return ExerciseService(db).list_categories()


@router.get(
    "/exercises/muscle-groups",
    response_model=List[str],
    status_code=status.HTTP_200_OK,
)
async def get_muscle_groups(db: Session = Depends(get_db)):
    """Get the distinct muscle groups (exercises without one are skipped)."""
    return ExerciseService(db).list_muscle_groups()


@router.get(
    "/exercises/{exercise_id}",
    response_model=ExerciseResponse,
    status_code=status.HTTP_200_OK,
)
async def get_exercise(exercise_id: UUID, db: Session = Depends(get_db)):
    """Get a single exercise."""
    return ExerciseService(db).get_exercise(exercise_id)
