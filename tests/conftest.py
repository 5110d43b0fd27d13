from datetime import date

import pytest
from flask_jwt_extended import create_access_token

from steadysteps import create_app
from steadysteps.config import TestConfig
from steadysteps.enums.app_enum import NutritionChallengeEnum, TimeCommitmentEnum
from steadysteps.extensions import db
from steadysteps.schemas.progress import Profile
from steadysteps.stores import InMemoryProgressStore

USER_ID = "user-1"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    with app.app_context():
        token = create_access_token(identity=USER_ID)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def memory_store():
    return InMemoryProgressStore()


@pytest.fixture
def profile():
    return Profile(
        user_id=USER_ID,
        first_name="Ana",
        nutrition_challenge=NutritionChallengeEnum.sugary_drinks,
        time_commitment=TimeCommitmentEnum.ten_to_fifteen,
        current_activity_goal_minutes=10,
        account_created_date=date(2026, 3, 1),
    )


@pytest.fixture
def store_with_profile(memory_store, profile):
    memory_store.save_profile(profile)
    return memory_store


@pytest.fixture
def onboarding_payload():
    return {
        "first_name": "Ana",
        "language": "en",
        "primary_goal": "energy",
        "activity_level": "light",
        "nutrition_challenge": "late_snacking",
        "time_commitment": "10_to_15",
        "diet_preference": "vegetarian",
        "biggest_obstacle": "time",
        "fitness_confidence": 2
    }
