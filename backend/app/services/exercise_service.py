"""
Exercise catalog queries.
"""

from uuid import UUID
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from app.models.exercise import Exercise
from app.services.exceptions import NotFoundError


class ExerciseService:
    """Read-only access to the exercise catalog."""

    def __init__(self, db: Session):
        self.db = db

    def list_exercises(
        self, category: Optional[str] = None, muscle_group: Optional[str] = None
    ) -> List[Exercise]:
        """List exercises ordered by name, optionally filtered by category and muscle group."""
        query = self.db.query(Exercise)

        if category:
            query = query.filter(Exercise.category == category)
        if muscle_group:
            query = query.filter(Exercise.muscle_group == muscle_group)

        return query.order_by(Exercise.name).all()

    def list_categories(self) -> List[str]:
        rows = (
            self.db.query(Exercise.category)
            .distinct()
            .order_by(Exercise.category)
            .all()
        )
        return [row.category for row in rows]

    def list_muscle_groups(self) -> List[str]:
        rows = (
            self.db.query(Exercise.muscle_group)
            .filter(Exercise.muscle_group.isnot(None))
            .distinct()
            .order_by(Exercise.muscle_group)
            .all()
        )
        return [row.muscle_group for row in rows]

    def get_exercise(self, exercise_id: UUID) -> Exercise:
        exercise = self.db.query(Exercise).filter(Exercise.id == exercise_id).first()
        if not exercise:
            raise NotFoundError("Exercise not found")
        return exercise

    def ensure_exist(self, exercise_ids: Iterable[UUID]) -> None:
        """
        Verify that every id refers to a catalog exercise.

        Args:
            exercise_ids: Exercise ids referenced by a request

        Raises:
            NotFoundError: If any id is unknown
        """
        wanted = set(exercise_ids)
        if not wanted:
            return

        # One query for the whole batch instead of one per id
        found = {
            row.id
            for row in self.db.query(Exercise.id).filter(Exercise.id.in_(wanted)).all()
        }
        missing = wanted - found
        if missing:
            raise NotFoundError(f"Exercise {sorted(str(m) for m in missing)[0]} not found")
