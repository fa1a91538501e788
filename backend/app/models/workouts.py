from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
    Boolean,
    DateTime,
    ForeignKey,
    Text,
    Index,
)
from sqlalchemy.orm import relationship
import uuid
from app.db.database import Base
from app.db.types import GUID, utcnow


class WorkoutPlan(Base):
    __tablename__ = "workout_plans"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="workout_plans")
    workout_exercises = relationship(
        "WorkoutExercise",
        back_populates="workout_plan",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.position",
    )
    scheduled_workouts = relationship(
        "ScheduledWorkout",
        back_populates="workout_plan",
        cascade="all, delete-orphan",
    )


class WorkoutExercise(Base):
    """A prescription: what the plan asks for, not what was performed."""

    __tablename__ = "workout_exercises"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    workout_plan_id = Column(
        GUID(),
        ForeignKey("workout_plans.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exercise_id = Column(GUID(), ForeignKey("exercises.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    sets = Column(Integer, nullable=False)
    reps = Column(Integer, nullable=False)
    weight = Column(Float, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds
    notes = Column(Text, nullable=True)

    workout_plan = relationship("WorkoutPlan", back_populates="workout_exercises")
    exercise = relationship("Exercise", lazy="joined")


class ScheduledWorkout(Base):
    __tablename__ = "scheduled_workouts"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    workout_plan_id = Column(
        GUID(),
        ForeignKey("workout_plans.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    scheduled_for = Column(DateTime(timezone=True), nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    workout_plan = relationship("WorkoutPlan", back_populates="scheduled_workouts")
    completed_workout = relationship(
        "CompletedWorkout",
        back_populates="scheduled_workout",
        uselist=False,
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("idx_scheduled_workouts_user_completed", "user_id", "completed"),
    )


class CompletedWorkout(Base):
    __tablename__ = "completed_workouts"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    # Unique: a scheduled workout is completed at most once
    scheduled_workout_id = Column(
        GUID(),
        ForeignKey("scheduled_workouts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    user_id = Column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    notes = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True)
    duration = Column(Integer, nullable=True)  # minutes
    completed_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    scheduled_workout = relationship(
        "ScheduledWorkout", back_populates="completed_workout"
    )
    exercise_results = relationship(
        "ExerciseResult",
        back_populates="completed_workout",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("idx_completed_workouts_user_completed_at", "user_id", "completed_at"),
    )


class ExerciseResult(Base):
    """A performance: what was actually done for one exercise."""

    __tablename__ = "exercise_results"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    completed_workout_id = Column(
        GUID(),
        ForeignKey("completed_workouts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    exercise_id = Column(GUID(), ForeignKey("exercises.id"), nullable=False, index=True)
    sets = Column(Integer, nullable=False)
    reps = Column(Integer, nullable=False)
    weight = Column(Float, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds
    notes = Column(Text, nullable=True)

    completed_workout = relationship(
        "CompletedWorkout", back_populates="exercise_results"
    )
    exercise = relationship("Exercise")
