from datetime import date, timedelta

import pytest

from steadysteps.data.nudge_messages import NUDGE_MESSAGES
from steadysteps.enums.app_enum import NudgeTypeEnum

PERFECT_CHECKIN = {"activity_completed": True, "nutrition_responses": [True, True, True], "mood": "good"}


@pytest.fixture
def onboarded(client, auth_headers, onboarding_payload):
    response = client.post("/api/v2/profile", json=onboarding_payload, headers=auth_headers)
    assert response.status_code == 201
    return response.get_json()["profile"]


def test_health(client):
    assert client.get("/api/v2/health").get_json() == {"status": "ready"}


def test_requires_token(client):
    assert client.get("/api/v2/profile").status_code == 401


def test_create_profile(onboarded):
    assert onboarded["total_points"] == 0
    assert onboarded["current_streak"] == 0
    assert onboarded["current_activity_goal_minutes"] == 10
    assert onboarded["current_stage"] == "beginner"
    assert onboarded["level"]["name"] == "Seedling"
    assert onboarded["habit_library_unlocked"] is False
    assert "sync_status" not in onboarded


def test_create_profile_twice(client, auth_headers, onboarded, onboarding_payload):
    response = client.post("/api/v2/profile", json=onboarding_payload, headers=auth_headers)
    assert response.status_code == 400


def test_activity_goal_is_capped(client, auth_headers, onboarding_payload):
    onboarding_payload["time_commitment"] = "45_to_60"
    response = client.post("/api/v2/profile", json=onboarding_payload, headers=auth_headers)
    assert response.get_json()["profile"]["current_activity_goal_minutes"] == 30


def test_create_profile_validation(client, auth_headers, onboarding_payload):
    del onboarding_payload["primary_goal"]
    assert client.post("/api/v2/profile", json=onboarding_payload, headers=auth_headers).status_code == 400

    onboarding_payload["primary_goal"] = "get_rich"
    assert client.post("/api/v2/profile", json=onboarding_payload, headers=auth_headers).status_code == 400


def test_update_profile(client, auth_headers, onboarded):
    response = client.put("/api/v2/profile", json={"language": "es", "total_points": 999}, headers=auth_headers)
    assert response.status_code == 200

    profile = client.get("/api/v2/profile", headers=auth_headers).get_json()
    assert profile["language"] == "es"
    assert profile["total_points"] == 0


def test_submit_checkin(client, auth_headers, onboarded):
    response = client.post("/api/v2/checkins", json=PERFECT_CHECKIN, headers=auth_headers)
    body = response.get_json()

    assert response.status_code == 201
    assert body["points_earned"] == 50
    assert body["current_streak"] == 1
    assert body["is_perfect_day"] is True
    assert body["celebrate"] is True
    assert "First Check-In" in body["new_badges"]
    assert body["checkin"]["date"] == date.today().isoformat()


def test_resubmitting_keeps_points(client, auth_headers, onboarded):
    client.post("/api/v2/checkins", json=PERFECT_CHECKIN, headers=auth_headers)
    response = client.post(
        "/api/v2/checkins",
        json={"activity_completed": False, "nutrition_responses": [False]},
        headers=auth_headers
    )
    body = response.get_json()

    assert response.status_code == 200
    assert body["action"] == "update"
    assert body["total_points"] == 50
    assert body["checkin"]["nutrition_responses"] == [False, None, None]


@pytest.mark.parametrize("payload", [
    {"nutrition_responses": [True]},
    {"activity_completed": "yes"},
    {"activity_completed": True, "nutrition_responses": [True, True, True, True]},
    {"activity_completed": True, "nutrition_responses": ["yes"]},
    {"activity_completed": True, "mood": "furious"},
    {"activity_completed": True, "date": "10/03/2026"},
])
def test_invalid_checkin(client, auth_headers, onboarded, payload):
    assert client.post("/api/v2/checkins", json=payload, headers=auth_headers).status_code == 400


def test_future_checkin_is_rejected(client, auth_headers, onboarded):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    response = client.post("/api/v2/checkins", json={**PERFECT_CHECKIN, "date": tomorrow}, headers=auth_headers)

    assert response.status_code == 400
    assert client.get("/api/v2/checkins", headers=auth_headers).get_json()["checkins"] == []


def test_checkin_before_last_checkin_is_rejected(client, auth_headers, onboarded):
    client.post("/api/v2/checkins", json=PERFECT_CHECKIN, headers=auth_headers)
    last_week = (date.today() - timedelta(days=7)).isoformat()

    response = client.post("/api/v2/checkins", json={**PERFECT_CHECKIN, "date": last_week}, headers=auth_headers)

    assert response.status_code == 400
    profile = client.get("/api/v2/profile", headers=auth_headers).get_json()
    assert profile["current_streak"] == 1
    assert profile["total_points"] == 50


def test_checkin_without_profile(client, auth_headers):
    response = client.post("/api/v2/checkins", json=PERFECT_CHECKIN, headers=auth_headers)
    assert response.status_code == 404


def test_checkin_history(client, auth_headers, onboarded):
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    client.post("/api/v2/checkins", json={**PERFECT_CHECKIN, "date": yesterday}, headers=auth_headers)
    client.post("/api/v2/checkins", json=PERFECT_CHECKIN, headers=auth_headers)

    page = client.get("/api/v2/checkins?page=1&page_size=1", headers=auth_headers).get_json()
    assert page["pagination"]["total_count"] == 2
    assert page["pagination"]["has_more"] is True
    assert page["checkins"][0]["date"] == date.today().isoformat()

    ranged = client.get(f"/api/v2/checkins?start_date={yesterday}&end_date={yesterday}",
                        headers=auth_headers).get_json()
    assert [c["date"] for c in ranged["checkins"]] == [yesterday]

    today = client.get("/api/v2/checkins/today", headers=auth_headers).get_json()
    assert today["checkin"]["points_earned"] == 50


def test_wellness_checkin(client, auth_headers, onboarded):
    url = f"/api/v2/checkins/{date.today().isoformat()}/wellness"

    response = client.put(url, json={"stress_level": 4, "energy_level": 2}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["checkin"]["checkin_completed"] is False

    assert client.put(url, json={"stress_level": 6}, headers=auth_headers).status_code == 400
    assert client.put(url, json={}, headers=auth_headers).status_code == 400
    assert client.put("/api/v2/checkins/not-a-date/wellness", json={"stress_level": 3},
                      headers=auth_headers).status_code == 400

    client.post("/api/v2/checkins", json=PERFECT_CHECKIN, headers=auth_headers)
    stats = client.get("/api/v2/progress/weekly", headers=auth_headers).get_json()["stats"]
    assert stats["checkins"] == 1
    assert stats["average_energy"] == 2.0
    assert stats["nutrition_score"] == 100
    assert stats["most_common_mood"] == "good"


def test_nutrition_questions(client, auth_headers, onboarded):
    questions = client.get("/api/v2/checkins/questions", headers=auth_headers).get_json()["questions"]
    assert len(questions) == 3
    assert questions[0] == "Did you avoid eating within 2 hours of bedtime?"


def test_nudge_for_new_user(client, auth_headers, onboarded):
    nudge = client.get("/api/v2/nudges/today", headers=auth_headers).get_json()["nudge"]
    assert nudge["type"] == "missed_days"
    assert nudge["tone"] == "gentle"
    assert nudge["message"] in NUDGE_MESSAGES["en"][NudgeTypeEnum.missed_days]


def test_not_behind_refresh(client, auth_headers, onboarded):
    body = client.post("/api/v2/not-behind/refresh", headers=auth_headers).get_json()
    assert body["active"] is True
    assert body["changed"] is True

    status = client.get("/api/v2/not-behind", headers=auth_headers).get_json()
    assert status["active"] is True
    assert status["activated_at"] is not None


def test_level_and_badges(client, auth_headers, onboarded):
    client.post("/api/v2/checkins", json=PERFECT_CHECKIN, headers=auth_headers)

    level = client.get("/api/v2/progress/level", headers=auth_headers).get_json()
    assert level["total_points"] == 50
    assert level["level"] == 1
    assert level["level_progress"] == 49.5

    badges = client.get("/api/v2/badges", headers=auth_headers).get_json()
    earned = {b["id"] for b in badges["badges"] if b["earned"]}
    assert {"first_checkin", "first_activity", "mindful_start", "perfect_start", "mood_starter"} <= earned
    assert badges["earned_count"] == len(earned)


def test_flexible_progress(client, auth_headers, onboarded):
    url = "/api/v2/profile/activity-goal"

    up = client.post(url, json={"adjustment": "up"}, headers=auth_headers).get_json()
    assert up["current_activity_goal_minutes"] == 15
    assert up["goal_progressions"] == 1
    assert up["new_badges"] == ["Goal Grower"]

    paused = client.post(url, json={"adjustment": "pause"}, headers=auth_headers).get_json()
    assert paused["current_activity_goal_minutes"] == 0
    assert paused["activity_paused"] is True

    assert client.post(url, json={"adjustment": "up"}, headers=auth_headers).status_code == 400

    resumed = client.post(url, json={"adjustment": "resume"}, headers=auth_headers).get_json()
    assert resumed["current_activity_goal_minutes"] == 5

    assert client.post(url, json={"adjustment": "down"}, headers=auth_headers).status_code == 400
    assert client.post(url, json={"adjustment": "sideways"}, headers=auth_headers).status_code == 400


def test_sync_without_cache(client, auth_headers, onboarded):
    body = client.post("/api/v2/sync", headers=auth_headers).get_json()
    assert body["pushed"] == 0
