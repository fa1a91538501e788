"""
Reference and sample data.

The exercise catalog is upserted by name, so seeding twice is harmless.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict

from sqlalchemy.orm import Session

from app.models.exercise import Exercise
from app.models.user import User
from app.models.workouts import WorkoutPlan, ScheduledWorkout
from app.services.completion_service import CompletionService
from app.services.plan_service import PlanService
from app.services.schedule_service import ScheduleService
from app.utils.password import hash_password

logger = logging.getLogger(__name__)

# (name, description, category, muscle_group)
EXERCISES = [
    # Strength - Chest
    ("Bench Press", "A compound exercise that targets the chest, shoulders, and triceps.", "Strength", "Chest"),
    ("Incline Bench Press", "Targets the upper chest muscles with an angled bench.", "Strength", "Chest"),
    ("Dumbbell Fly", "An isolation exercise that targets the chest muscles.", "Strength", "Chest"),
    ("Push-Up", "A bodyweight exercise that targets the chest, shoulders, and triceps.", "Strength", "Chest"),
    # Strength - Back
    ("Pull-Up", "A bodyweight exercise that targets the back and biceps.", "Strength", "Back"),
    ("Deadlift", "A compound exercise that targets the back, glutes, and hamstrings.", "Strength", "Back"),
    ("Bent-Over Row", "A compound exercise that targets the back and biceps.", "Strength", "Back"),
    ("Lat Pulldown", "A machine exercise that targets the latissimus dorsi muscles.", "Strength", "Back"),
    # Strength - Legs
    ("Squat", "A compound exercise that targets the quadriceps, hamstrings, and glutes.", "Strength", "Legs"),
    ("Leg Press", "A machine exercise that targets the quadriceps, hamstrings, and glutes.", "Strength", "Legs"),
    ("Leg Extension", "An isolation exercise that targets the quadriceps.", "Strength", "Legs"),
    ("Leg Curl", "An isolation exercise that targets the hamstrings.", "Strength", "Legs"),
    # Strength - Shoulders
    ("Overhead Press", "A compound exercise that targets the shoulders and triceps.", "Strength", "Shoulders"),
    ("Lateral Raise", "An isolation exercise that targets the side deltoids.", "Strength", "Shoulders"),
    ("Front Raise", "An isolation exercise that targets the front deltoids.", "Strength", "Shoulders"),
    ("Reverse Fly", "An isolation exercise that targets the rear deltoids.", "Strength", "Shoulders"),
    # Strength - Arms
    ("Bicep Curl", "An isolation exercise that targets the biceps.", "Strength", "Arms"),
    ("Tricep Extension", "An isolation exercise that targets the triceps.", "Strength", "Arms"),
    ("Hammer Curl", "Targets the biceps and forearms with a neutral grip.", "Strength", "Arms"),
    ("Skull Crusher", "A lying extension that targets the triceps.", "Strength", "Arms"),
    # Strength - Core
    ("Crunch", "A bodyweight exercise that targets the abdominal muscles.", "Strength", "Core"),
    ("Plank", "An isometric hold that targets the core.", "Strength", "Core"),
    ("Russian Twist", "A rotational exercise that targets the obliques.", "Strength", "Core"),
    ("Leg Raise", "Targets the lower abdominal muscles.", "Strength", "Core"),
    # Cardio
    ("Running", "Steady or interval running for cardiovascular fitness.", "Cardio", None),
    ("Cycling", "Stationary or road cycling for cardiovascular fitness.", "Cardio", None),
    ("Rowing", "Full-body cardio on a rowing machine.", "Cardio", None),
    ("Jump Rope", "High-intensity cardio with a skipping rope.", "Cardio", None),
    ("Stair Climber", "Low-impact cardio on a stair machine.", "Cardio", None),
    # Flexibility
    ("Hamstring Stretch", "Stretches the back of the thighs.", "Flexibility", "Legs"),
    ("Quad Stretch", "Stretches the front of the thighs.", "Flexibility", "Legs"),
    ("Shoulder Stretch", "Stretches the deltoids and rotator cuff.", "Flexibility", "Shoulders"),
    ("Chest Stretch", "Opens up the chest and front shoulders.", "Flexibility", "Chest"),
    ("Back Stretch", "Relieves tension in the upper and lower back.", "Flexibility", "Back"),
]

SAMPLE_PASSWORD = "Password123!"


def seed_exercises(db: Session) -> int:
    """
    Insert or update the exercise catalog.

    Returns:
        Number of exercises in the catalog after seeding
    """
    existing = {e.name: e for e in db.query(Exercise).all()}

    for name, description, category, muscle_group in EXERCISES:
        exercise = existing.get(name)
        if exercise:
            exercise.description = description
            exercise.category = category
            exercise.muscle_group = muscle_group
        else:
            db.add(
                Exercise(
                    name=name,
                    description=description,
                    category=category,
                    muscle_group=muscle_group,
                )
            )

    db.commit()
    count = db.query(Exercise).count()
    logger.info(f"[SEED] Exercise catalog holds {count} exercise(s)")
    return count


def _get_or_create_user(db: Session, email: str, name: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user:
        return user
    user = User(email=email, name=name, password_hash=hash_password(SAMPLE_PASSWORD))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def seed_sample_data(db: Session) -> Dict[str, int]:
    """
    Create demo users with a couple of plans, a pending and a completed workout.

    Users that already own plans are left untouched.

    Returns:
        Counts of created plans and scheduled workouts
    """
    seed_exercises(db)
    by_name = {e.name: e.id for e in db.query(Exercise).all()}

    john = _get_or_create_user(db, "john.doe@example.com", "John Doe")
    jane = _get_or_create_user(db, "jane.smith@example.com", "Jane Smith")

    plans = PlanService(db)
    schedule = ScheduleService(db)
    now = datetime.now(timezone.utc)
    created_plans = 0
    created_scheduled = 0

    if not db.query(WorkoutPlan).filter(WorkoutPlan.user_id == john.id).first():
        strength = plans.create_plan(
            john.id,
            "Full Body Strength",
            "A comprehensive strength training program targeting all major muscle groups",
            [
                {"exercise_id": by_name["Squat"], "sets": 4, "reps": 8, "weight": 80.0},
                {"exercise_id": by_name["Bench Press"], "sets": 4, "reps": 8, "weight": 60.0},
                {"exercise_id": by_name["Deadlift"], "sets": 3, "reps": 5, "weight": 100.0},
                {"exercise_id": by_name["Plank"], "sets": 3, "reps": 1, "duration": 60},
            ],
        )
        created_plans += 1

        done = schedule.schedule_workout(john.id, strength.id, now - timedelta(days=2))
        schedule.schedule_workout(john.id, strength.id, now + timedelta(days=1))
        created_scheduled += 2

        CompletionService(db).complete_workout(
            john.id,
            done.id,
            notes="Felt strong today",
            rating=4,
            duration=55,
            exercise_results=[
                {"exercise_id": by_name["Squat"], "sets": 4, "reps": 8, "weight": 80.0},
                {"exercise_id": by_name["Bench Press"], "sets": 4, "reps": 7, "weight": 60.0},
                {"exercise_id": by_name["Deadlift"], "sets": 3, "reps": 5, "weight": 100.0},
            ],
        )

    if not db.query(WorkoutPlan).filter(WorkoutPlan.user_id == jane.id).first():
        cardio = plans.create_plan(
            jane.id,
            "Cardio Fitness",
            "Endurance work with a stretching cool-down",
            [
                {"exercise_id": by_name["Running"], "sets": 1, "reps": 1, "duration": 1800},
                {"exercise_id": by_name["Jump Rope"], "sets": 3, "reps": 100},
                {"exercise_id": by_name["Hamstring Stretch"], "sets": 2, "reps": 1, "duration": 30},
            ],
        )
        created_plans += 1
        schedule.schedule_workout(jane.id, cardio.id, now + timedelta(days=2))
        created_scheduled += 1

    logger.info(
        f"[SEED] Sample data: {created_plans} plan(s), {created_scheduled} scheduled workout(s)"
    )
    return {
        "plans": created_plans,
        "scheduled_workouts": created_scheduled,
        "total_scheduled": db.query(ScheduledWorkout).count(),
    }
