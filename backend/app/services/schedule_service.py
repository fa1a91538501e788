"""
Scheduling service.

Binds workout plans to points in time for a user.
"""

import logging
from uuid import UUID
from datetime import datetime
from typing import List
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import and_

from app.db.types import as_utc
from app.models.workouts import WorkoutPlan, ScheduledWorkout
from app.services.plan_service import PlanService

logger = logging.getLogger(__name__)


class ScheduleService:
    """Service for scheduling workouts from plans."""

    def __init__(self, db: Session):
        self.db = db

    def schedule_workout(
        self, user_id: UUID, plan_id: UUID, scheduled_for: datetime
    ) -> ScheduledWorkout:
        """
        Schedule a workout from one of the user's plans.

        Args:
            user_id: Owning user
            plan_id: Plan to schedule
            scheduled_for: When the workout should take place

        Returns:
            Created ScheduledWorkout with completed=False

        Raises:
            NotFoundError: If the plan is not owned by the user
        """
        # Raises NotFoundError for absent and foreign plans alike
        PlanService(self.db).get_plan(user_id, plan_id)

        scheduled = ScheduledWorkout(
            workout_plan_id=plan_id,
            user_id=user_id,
            scheduled_for=as_utc(scheduled_for),
            completed=False,
        )

        try:
            self.db.add(scheduled)
            self.db.commit()
            self.db.refresh(scheduled)
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"[SCHEDULE] Scheduled plan {plan_id} for {scheduled.scheduled_for.isoformat()} (user {user_id})"
        )
        return scheduled

    def list_scheduled(self, user_id: UUID, completed: bool) -> List[ScheduledWorkout]:
        """
        Get user's scheduled workouts with the given completion state,
        earliest first.
        """
        return (
            self.db.query(ScheduledWorkout)
            .options(
                selectinload(ScheduledWorkout.workout_plan).selectinload(
                    WorkoutPlan.workout_exercises
                ),
                selectinload(ScheduledWorkout.completed_workout),
            )
            .filter(
                and_(
                    ScheduledWorkout.user_id == user_id,
                    ScheduledWorkout.completed == completed,
                )
            )
            .order_by(ScheduledWorkout.scheduled_for)
            .all()
        )
