"""
Script to create tables and seed the exercise catalog.

Pass --sample to also create demo users, plans and workouts.
"""

import sys

from app.db.database import SessionLocal, init_database
from app.db.seed import SAMPLE_PASSWORD, seed_exercises, seed_sample_data


def main(with_sample_data: bool = False):
    """Create tables, then seed reference (and optionally sample) data."""
    init_database()

    db = SessionLocal()
    try:
        count = seed_exercises(db)
        print(f"Exercise catalog seeded: {count} exercise(s).")

        if with_sample_data:
            result = seed_sample_data(db)
            print(
                f"Sample data: {result['plans']} plan(s) and "
                f"{result['scheduled_workouts']} scheduled workout(s) created."
            )
            print(f"Demo users log in with password: {SAMPLE_PASSWORD}")
    except Exception as e:
        db.rollback()
        print(f"Error occurred: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    print("=" * 50)
    print("Seeding workout tracker database")
    print("=" * 50)

    main(with_sample_data="--sample" in sys.argv[1:])
