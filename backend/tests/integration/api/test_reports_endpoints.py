"""
Integration tests for the report endpoint.
"""

from datetime import datetime, timezone

import pytest

from app.models.workouts import CompletedWorkout


@pytest.fixture
def completed_history(client, test_db, sample_user, sample_exercises, auth_headers):
    """Two completed workouts for sample_user, on 2024-03-05 and 2024-03-20."""
    headers = auth_headers(sample_user)
    plan = client.post(
        "/api/workouts",
        json={
            "name": "Mixed",
            "exercises": [
                {"exerciseId": str(sample_exercises["Squat"].id), "sets": 5, "reps": 5}
            ],
        },
        headers=headers,
    ).json()

    sessions = [
        (
            datetime(2024, 3, 5, 18, 0, tzinfo=timezone.utc),
            {"rating": 5, "duration": 40},
            [{"exerciseId": str(sample_exercises["Squat"].id), "sets": 5, "reps": 5, "weight": 100}],
        ),
        (
            datetime(2024, 3, 20, 18, 0, tzinfo=timezone.utc),
            {"duration": 25},
            [{"exerciseId": str(sample_exercises["Running"].id), "sets": 1, "reps": 1, "duration": 1500}],
        ),
    ]
    for completed_at, extra, results in sessions:
        scheduled = client.post(
            "/api/schedule",
            json={"workoutPlanId": plan["id"], "scheduledFor": completed_at.isoformat()},
            headers=headers,
        ).json()
        done = client.post(
            "/api/schedule/complete",
            json={"scheduledWorkoutId": scheduled["id"], "exerciseResults": results, **extra},
            headers=headers,
        ).json()
        row = test_db.query(CompletedWorkout).filter(CompletedWorkout.id == done["id"]).one()
        row.completed_at = completed_at
    test_db.commit()
    return headers


class TestReportEndpoint:
    """Tests for GET /api/reports."""

    def test_report_shape(self, client, completed_history):
        response = client.get("/api/reports", headers=completed_history)

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"summary", "workouts", "exerciseDetails"}
        summary = data["summary"]
        assert summary["totalWorkouts"] == 2
        assert summary["totalDuration"] == 65
        # Unrated workout is left out of the average
        assert summary["averageRating"] == 5
        assert summary["startDate"] is None
        assert summary["endDate"] is None

        assert [w["workoutPlanName"] for w in data["workouts"]] == ["Mixed", "Mixed"]
        assert data["workouts"][0]["exerciseCount"] == 1
        assert data["workouts"][0]["rating"] is None

        details = {d["name"]: d for d in data["exerciseDetails"]}
        assert details["Squat"]["stats"] == {
            "totalSets": 5,
            "totalReps": 5,
            "totalWeight": 100.0,
            "totalDuration": 0,
            "count": 1,
        }
        assert details["Running"]["stats"]["totalDuration"] == 1500
        assert details["Running"]["muscleGroup"] is None

    def test_report_date_window(self, client, completed_history):
        """Date-only bounds mean midnight UTC."""
        response = client.get(
            "/api/reports",
            params={"startDate": "2024-03-01", "endDate": "2024-03-10"},
            headers=completed_history,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["totalWorkouts"] == 1
        assert data["summary"]["startDate"].startswith("2024-03-01T00:00:00")
        assert [d["name"] for d in data["exerciseDetails"]] == ["Squat"]

    def test_report_datetime_bounds(self, client, completed_history):
        response = client.get(
            "/api/reports",
            params={"startDate": "2024-03-20T18:00:00Z"},
            headers=completed_history,
        )

        assert response.status_code == 200
        assert response.json()["summary"]["totalWorkouts"] == 1

    def test_report_category_filter(self, client, completed_history):
        """Category narrows exercise details only."""
        response = client.get(
            "/api/reports", params={"category": "Cardio"}, headers=completed_history
        )

        data = response.json()
        assert data["summary"]["totalWorkouts"] == 2
        assert len(data["workouts"]) == 2
        assert [d["name"] for d in data["exerciseDetails"]] == ["Running"]

    def test_report_muscle_group_filter(self, client, completed_history):
        response = client.get(
            "/api/reports", params={"muscleGroup": "Legs"}, headers=completed_history
        )

        assert [d["name"] for d in response.json()["exerciseDetails"]] == ["Squat"]

    def test_report_empty(self, client, sample_user, auth_headers):
        response = client.get("/api/reports", headers=auth_headers(sample_user))

        assert response.status_code == 200
        assert response.json()["summary"]["totalWorkouts"] == 0
        assert response.json()["summary"]["averageRating"] == 0

    def test_report_bad_date(self, client, sample_user, auth_headers):
        response = client.get(
            "/api/reports", params={"startDate": "last week"}, headers=auth_headers(sample_user)
        )

        assert response.status_code == 400

    def test_report_requires_auth(self, client):
        assert client.get("/api/reports").status_code == 401
