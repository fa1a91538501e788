"""
Workout completion service.

Turns a scheduled workout into a completed workout with per-exercise results.

The whole transition is one transaction:
1. flip ScheduledWorkout.completed to True
2. insert the CompletedWorkout row
3. insert one ExerciseResult row per submitted result

Either all three land or none do. The scheduled workout row is read with
SELECT ... FOR UPDATE so two concurrent completions serialize on it; the
unique constraint on completed_workouts.scheduled_workout_id backs this up
on databases without row locks.
"""

import logging
from uuid import UUID
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from sqlalchemy import and_, desc

from app.models.workouts import (
    ScheduledWorkout,
    CompletedWorkout,
    ExerciseResult,
)
from app.services.exceptions import AlreadyCompletedError, NotFoundError
from app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)


class CompletionService:
    """Service for recording completed workouts."""

    def __init__(self, db: Session):
        self.db = db

    def complete_workout(
        self,
        user_id: UUID,
        scheduled_workout_id: UUID,
        notes: Optional[str] = None,
        rating: Optional[int] = None,
        duration: Optional[int] = None,
        exercise_results: Optional[List[dict]] = None,
    ) -> CompletedWorkout:
        """
        Mark a scheduled workout as completed and record exercise results.

        Result exercise ids are checked against the catalog but not against
        the plan's prescriptions; any exercise may be logged.

        Args:
            user_id: Owning user
            scheduled_workout_id: Scheduled workout to complete
            notes: Optional free-text notes
            rating: Optional rating
            duration: Optional total duration in minutes
            exercise_results: List of dicts with exercise_id, sets, reps and
                optional weight, duration, notes

        Returns:
            CompletedWorkout with exercise_results loaded

        Raises:
            NotFoundError: If the scheduled workout is not owned by the user
            AlreadyCompletedError: If it has already been completed
        """
        exercise_results = exercise_results or []

        try:
            # Check-then-act inside the same transaction as the writes
            scheduled = (
                self.db.query(ScheduledWorkout)
                .filter(
                    and_(
                        ScheduledWorkout.id == scheduled_workout_id,
                        ScheduledWorkout.user_id == user_id,
                    )
                )
                .with_for_update()
                .first()
            )
            if not scheduled:
                raise NotFoundError("Scheduled workout not found")
            if scheduled.completed:
                raise AlreadyCompletedError()

            ExerciseService(self.db).ensure_exist(
                r["exercise_id"] for r in exercise_results
            )

            scheduled.completed = True

            completed = CompletedWorkout(
                scheduled_workout_id=scheduled.id,
                user_id=user_id,
                notes=notes,
                rating=rating,
                duration=duration,
            )
            self.db.add(completed)
            self.db.flush()

            self._add_exercise_results(completed, exercise_results)

            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if not self._has_completion(scheduled_workout_id):
                logger.exception(
                    f"[COMPLETE] Completion of {scheduled_workout_id} rolled back"
                )
                raise
            # Lost the race against a concurrent completion
            logger.warning(
                f"[COMPLETE] Concurrent completion rejected for {scheduled_workout_id}"
            )
            raise AlreadyCompletedError()
        except (NotFoundError, AlreadyCompletedError):
            self.db.rollback()
            logger.warning(
                f"[COMPLETE] Rejected completion of {scheduled_workout_id} for user {user_id}"
            )
            raise
        except Exception:
            self.db.rollback()
            logger.exception(
                f"[COMPLETE] Completion of {scheduled_workout_id} rolled back"
            )
            raise

        logger.info(
            f"[COMPLETE] Completed {scheduled_workout_id} with "
            f"{len(exercise_results)} result(s) for user {user_id}"
        )
        return self.get_completed(user_id, completed.id)

    def _has_completion(self, scheduled_workout_id: UUID) -> bool:
        return (
            self.db.query(CompletedWorkout.id)
            .filter(CompletedWorkout.scheduled_workout_id == scheduled_workout_id)
            .first()
            is not None
        )

    def _add_exercise_results(
        self, completed: CompletedWorkout, exercise_results: List[dict]
    ) -> None:
        for r in exercise_results:
            self.db.add(
                ExerciseResult(
                    completed_workout_id=completed.id,
                    exercise_id=r["exercise_id"],
                    sets=r["sets"],
                    reps=r["reps"],
                    weight=r.get("weight"),
                    duration=r.get("duration"),
                    notes=r.get("notes"),
                )
            )
        self.db.flush()

    def get_completed(self, user_id: UUID, completed_id: UUID) -> CompletedWorkout:
        completed = (
            self.db.query(CompletedWorkout)
            .options(selectinload(CompletedWorkout.exercise_results))
            .filter(
                and_(
                    CompletedWorkout.id == completed_id,
                    CompletedWorkout.user_id == user_id,
                )
            )
            .first()
        )
        if not completed:
            raise NotFoundError("Completed workout not found")
        return completed

    def list_completed(self, user_id: UUID) -> List[CompletedWorkout]:
        """Get user's completed workouts, most recent first."""
        return (
            self.db.query(CompletedWorkout)
            .options(
                selectinload(CompletedWorkout.exercise_results),
                selectinload(CompletedWorkout.scheduled_workout).selectinload(
                    ScheduledWorkout.workout_plan
                ),
            )
            .filter(CompletedWorkout.user_id == user_id)
            .order_by(desc(CompletedWorkout.completed_at))
            .all()
        )
