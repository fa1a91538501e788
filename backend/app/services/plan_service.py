"""
Workout plan service.

Handles CRUD operations for workout plans and their prescribed exercises.
A plan and its exercise rows are always written together in one transaction.
"""

import logging
from uuid import UUID
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import and_, desc

from app.models.workouts import WorkoutPlan, WorkoutExercise
from app.services.exceptions import NotFoundError
from app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)


class PlanService:
    """Service for managing workout plans."""

    def __init__(self, db: Session):
        self.db = db

    def create_plan(
        self,
        user_id: UUID,
        name: str,
        description: Optional[str] = None,
        exercises: Optional[List[dict]] = None,
    ) -> WorkoutPlan:
        """
        Create a workout plan together with its exercise prescriptions.

        Args:
            user_id: Owning user
            name: Plan name
            description: Optional description
            exercises: List of dicts with exercise_id, sets, reps and optional
                weight, duration, notes

        Returns:
            Created WorkoutPlan with exercises loaded

        Raises:
            NotFoundError: If an exercise id is not in the catalog
        """
        exercises = exercises or []
        ExerciseService(self.db).ensure_exist(e["exercise_id"] for e in exercises)

        plan = WorkoutPlan(user_id=user_id, name=name, description=description)
        plan.workout_exercises = self._build_exercises(exercises)

        try:
            self.db.add(plan)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"[PLANS] Created plan {plan.id} with {len(exercises)} exercise(s) for user {user_id}"
        )
        return self.get_plan(user_id, plan.id)

    def list_plans(self, user_id: UUID) -> List[WorkoutPlan]:
        """Get user's plans, newest first."""
        return (
            self.db.query(WorkoutPlan)
            .options(selectinload(WorkoutPlan.workout_exercises))
            .filter(WorkoutPlan.user_id == user_id)
            .order_by(desc(WorkoutPlan.created_at))
            .all()
        )

    def get_plan(self, user_id: UUID, plan_id: UUID) -> WorkoutPlan:
        """
        Get a plan by id.

        Raises:
            NotFoundError: If the plan does not exist or belongs to another user
        """
        plan = (
            self.db.query(WorkoutPlan)
            .options(selectinload(WorkoutPlan.workout_exercises))
            .filter(
                and_(
                    WorkoutPlan.id == plan_id,
                    WorkoutPlan.user_id == user_id,
                )
            )
            .first()
        )
        if not plan:
            raise NotFoundError("Workout plan not found")
        return plan

    def update_plan(
        self,
        user_id: UUID,
        plan_id: UUID,
        name: str,
        description: Optional[str] = None,
        exercises: Optional[List[dict]] = None,
    ) -> WorkoutPlan:
        """
        Replace a plan's name, description and entire exercise list.

        Existing exercise rows are deleted and new ones created, so
        WorkoutExercise ids do not survive an update.

        Raises:
            NotFoundError: If the plan is not owned by the user or an
                exercise id is unknown
        """
        exercises = exercises or []
        plan = self.get_plan(user_id, plan_id)
        ExerciseService(self.db).ensure_exist(e["exercise_id"] for e in exercises)

        try:
            plan.name = name
            plan.description = description

            # Delete-then-recreate; flush the deletes before the inserts
            plan.workout_exercises.clear()
            self.db.flush()
            plan.workout_exercises.extend(self._build_exercises(exercises))

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"[PLANS] Updated plan {plan_id}: {len(exercises)} exercise(s) after replace"
        )
        return self.get_plan(user_id, plan_id)

    def delete_plan(self, user_id: UUID, plan_id: UUID) -> None:
        """
        Delete a plan; its exercises and scheduled workouts go with it.

        Raises:
            NotFoundError: If the plan is not owned by the user
        """
        plan = self.get_plan(user_id, plan_id)

        try:
            self.db.delete(plan)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"[PLANS] Deleted plan {plan_id} for user {user_id}")

    @staticmethod
    def _build_exercises(exercises: List[dict]) -> List[WorkoutExercise]:
        return [
            WorkoutExercise(
                exercise_id=e["exercise_id"],
                position=index,
                sets=e["sets"],
                reps=e["reps"],
                weight=e.get("weight"),
                duration=e.get("duration"),
                notes=e.get("notes"),
            )
            for index, e in enumerate(exercises)
        ]
