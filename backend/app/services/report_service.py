"""
Workout report service.

Aggregates completed workouts and exercise results over a date window.

Summary totals are computed from every completed workout in the window.
The category / muscle group filter only narrows ``exercise_details``, so a
workout whose exercises are all filtered out still counts in the summary.
"""

from uuid import UUID
from datetime import date, datetime, time
from typing import Dict, List, Optional, Union
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import and_, desc

from app.db.types import as_utc
from app.models.exercise import Exercise
from app.models.workouts import (
    CompletedWorkout,
    ExerciseResult,
    ScheduledWorkout,
)

DateBound = Union[datetime, date, None]


def to_utc_datetime(value: DateBound) -> Optional[datetime]:
    """
    Normalize a report bound.

    Dates mean midnight UTC of that day; naive datetimes are taken as UTC
    and aware ones are converted to UTC.
    """
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    return as_utc(value)


class ExerciseStats:
    """Accumulated results for one exercise."""

    def __init__(self):
        self.total_sets = 0
        self.total_reps = 0
        self.total_weight = 0.0
        self.total_duration = 0
        self.count = 0

    def add(self, result: ExerciseResult) -> None:
        self.total_sets += result.sets
        self.total_reps += result.reps
        self.total_weight += result.weight or 0
        self.total_duration += result.duration or 0
        self.count += 1


class ReportSummary:
    """Top-level report numbers."""

    def __init__(
        self,
        total_workouts: int,
        total_duration: int,
        average_rating: float,
        start_date: Optional[datetime],
        end_date: Optional[datetime],
    ):
        self.total_workouts = total_workouts
        self.total_duration = total_duration
        self.average_rating = average_rating
        self.start_date = start_date
        self.end_date = end_date


class WorkoutEntry:
    """One completed workout as shown in a report."""

    def __init__(
        self,
        id: UUID,
        completed_at: datetime,
        duration: Optional[int],
        rating: Optional[int],
        workout_plan_name: str,
        exercise_count: int,
    ):
        self.id = id
        self.completed_at = completed_at
        self.duration = duration
        self.rating = rating
        self.workout_plan_name = workout_plan_name
        self.exercise_count = exercise_count


class ExerciseDetail:
    """Catalog data for an exercise plus its accumulated stats."""

    def __init__(self, exercise: Exercise, stats: ExerciseStats):
        self.id = exercise.id
        self.name = exercise.name
        self.category = exercise.category
        self.muscle_group = exercise.muscle_group
        self.stats = stats


class WorkoutReport:
    """Result of a report generation."""

    def __init__(
        self,
        summary: ReportSummary,
        workouts: List[WorkoutEntry],
        exercise_details: List[ExerciseDetail],
    ):
        self.summary = summary
        self.workouts = workouts
        self.exercise_details = exercise_details


class ReportService:
    """Service for generating workout reports."""

    def __init__(self, db: Session):
        self.db = db

    def generate_report(
        self,
        user_id: UUID,
        start_date: DateBound = None,
        end_date: DateBound = None,
        category: Optional[str] = None,
        muscle_group: Optional[str] = None,
    ) -> WorkoutReport:
        """
        Generate a workout report for a user.

        Args:
            user_id: User ID
            start_date: Inclusive lower bound on completion time (optional)
            end_date: Inclusive upper bound on completion time (optional)
            category: Restrict exercise details to this category (optional)
            muscle_group: Restrict exercise details to this muscle group (optional)

        Returns:
            WorkoutReport with summary, per-workout entries and exercise details
        """
        start = to_utc_datetime(start_date)
        end = to_utc_datetime(end_date)

        workouts = self._completed_workouts(user_id, start, end)

        total_workouts = len(workouts)
        total_duration = sum(w.duration or 0 for w in workouts)

        # Workouts without a rating are left out of the denominator; with no
        # ratings at all the denominator stays 1 and the average is 0.
        ratings = [w.rating for w in workouts if w.rating is not None]
        average_rating = sum(ratings) / (len(ratings) or 1)

        exercise_stats = self._exercise_stats(user_id, start, end)
        exercise_details = self._exercise_details(
            exercise_stats, category, muscle_group
        )

        summary = ReportSummary(
            total_workouts=total_workouts,
            total_duration=total_duration,
            average_rating=average_rating,
            start_date=start,
            end_date=end,
        )
        entries = [
            WorkoutEntry(
                id=w.id,
                completed_at=w.completed_at,
                duration=w.duration,
                rating=w.rating,
                workout_plan_name=w.scheduled_workout.workout_plan.name,
                exercise_count=len(w.exercise_results),
            )
            for w in workouts
        ]

        return WorkoutReport(
            summary=summary, workouts=entries, exercise_details=exercise_details
        )

    def _date_filters(
        self, user_id: UUID, start: Optional[datetime], end: Optional[datetime]
    ) -> list:
        filters = [CompletedWorkout.user_id == user_id]
        if start is not None:
            filters.append(CompletedWorkout.completed_at >= start)
        if end is not None:
            filters.append(CompletedWorkout.completed_at <= end)
        return filters

    def _completed_workouts(
        self, user_id: UUID, start: Optional[datetime], end: Optional[datetime]
    ) -> List[CompletedWorkout]:
        return (
            self.db.query(CompletedWorkout)
            .options(
                selectinload(CompletedWorkout.scheduled_workout).selectinload(
                    ScheduledWorkout.workout_plan
                ),
                selectinload(CompletedWorkout.exercise_results),
            )
            .filter(and_(*self._date_filters(user_id, start, end)))
            .order_by(desc(CompletedWorkout.completed_at))
            .all()
        )

    def _exercise_stats(
        self, user_id: UUID, start: Optional[datetime], end: Optional[datetime]
    ) -> Dict[UUID, ExerciseStats]:
        """Group every result in the window by exercise id."""
        results = (
            self.db.query(ExerciseResult)
            .join(
                CompletedWorkout,
                ExerciseResult.completed_workout_id == CompletedWorkout.id,
            )
            .filter(and_(*self._date_filters(user_id, start, end)))
            .all()
        )

        stats: Dict[UUID, ExerciseStats] = {}
        for result in results:
            if result.exercise_id not in stats:
                stats[result.exercise_id] = ExerciseStats()
            stats[result.exercise_id].add(result)
        return stats

    def _exercise_details(
        self,
        exercise_stats: Dict[UUID, ExerciseStats],
        category: Optional[str],
        muscle_group: Optional[str],
    ) -> List[ExerciseDetail]:
        if not exercise_stats:
            return []

        query = self.db.query(Exercise).filter(
            Exercise.id.in_(list(exercise_stats.keys()))
        )
        if category:
            query = query.filter(Exercise.category == category)
        if muscle_group:
            query = query.filter(Exercise.muscle_group == muscle_group)

        return [
            ExerciseDetail(exercise, exercise_stats[exercise.id])
            for exercise in query.order_by(Exercise.name).all()
        ]
