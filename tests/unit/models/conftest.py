from datetime import datetime

import pytest

from trainor.models.exercise import Exercise
from trainor.models.profile import Profile
from trainor.models.workout import Workout
from tests.test_data import EXERCISE_ROWS, PROFILE_ROW, USER_ID

# ───────────── Exercise  ─────────────


@pytest.fixture
def exercise():
    """Factory fixture for Exercise instances."""

    def _make(**overrides):
        return Exercise(**{**EXERCISE_ROWS[1], **overrides})

    return _make


# ───────────── Profile  ─────────────


@pytest.fixture
def profile_kwargs():
    return dict(PROFILE_ROW)


@pytest.fixture
def user_profile(profile_kwargs):
    return Profile(**profile_kwargs)


# ───────────── Workout  ─────────────


@pytest.fixture
def make_workout():
    def _make(**overrides):
        defaults = {
            "id": "w-1",
            "name": "Dino Day",
            "description": "Roar",
            "duration_minutes": 20,
            "difficulty_level": "beginner",
            "category": "full_body",
            "is_template": False,
            "created_by": USER_ID,
            "created_at": datetime(2025, 1, 1, 12, 0, 0),
            "updated_at": datetime(2025, 1, 2, 12, 0, 0),
        }
        return Workout(**{**defaults, **overrides})

    return _make
