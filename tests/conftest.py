from datetime import datetime, timezone
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from trainor.main import app
from trainor.models.exercise import Exercise
from trainor.models.workout import WorkoutDraft, WorkoutExerciseEntry
from trainor.utils import auth as auth_utils
from trainor.utils import dates
from tests.fakes import FakeAuth, FakeSupabaseClient, FakeTable, make_session
from tests.test_data import ACCESS_TOKEN, EXERCISE_ROWS, USER_EMAIL, USER_ID


@pytest.fixture(autouse=True)
def _disable_auth_bypass(monkeypatch):
    monkeypatch.setattr(auth_utils.settings, "DISABLE_AUTH_FOR_LOCAL_DEV", False)


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    now = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    monkeypatch.setattr(dates, "now", lambda: now)
    return now


# ─────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def make_client() -> Callable[..., FakeSupabaseClient]:
    """
    Factory for fake Supabase clients.
    Example:
        client = make_client(exercises=EXERCISE_ROWS, fail_on={"workouts": {"insert"}})
    """

    def _make(*, auth: FakeAuth | None = None, fail_on: dict | None = None, **tables):
        fail_on = fail_on or {}
        names = set(tables) | set(fail_on)
        return FakeSupabaseClient(
            tables={
                name: FakeTable(name, tables.get(name), fail_on=fail_on.get(name))
                for name in names
            },
            auth=auth,
        )

    return _make


@pytest.fixture
def catalog_client(make_client) -> FakeSupabaseClient:
    return make_client(exercises=EXERCISE_ROWS)


@pytest.fixture
def signed_in_auth() -> FakeAuth:
    return FakeAuth(session=make_session())


@pytest.fixture
def exercise_factory() -> Callable[..., Exercise]:
    def _make(**overrides: Any) -> Exercise:
        base = Exercise.model_validate(EXERCISE_ROWS[1])
        return base.model_copy(update=overrides)

    return _make


@pytest.fixture
def draft_factory(exercise_factory) -> Callable[..., WorkoutDraft]:
    def _make(**overrides: Any) -> WorkoutDraft:
        base = WorkoutDraft(
            name="Dino Day",
            description="Roar",
            exercises=[
                WorkoutExerciseEntry(
                    exercise=exercise_factory(), duration=45, order=0, reps=12
                ),
                WorkoutExerciseEntry(
                    exercise=exercise_factory(
                        id="ex-pike", name="Pike Push-Up", difficulty_level="intermediate"
                    ),
                    duration=30,
                    order=1,
                ),
            ],
            total_duration=75,
        )
        return base.model_copy(update=overrides)

    return _make


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture
def client(app_instance):
    """Plain client, real dependencies."""
    test_client = TestClient(app_instance, raise_server_exceptions=False)
    try:
        yield test_client
    finally:
        app_instance.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(app_instance):
    """
    Client with auth.require_auth overridden to always
    return fake, valid claims.
    """

    def fake_require_auth():
        return {"sub": USER_ID, "email": USER_EMAIL, "exp": 1700000000, "access_token": ACCESS_TOKEN}

    app_instance.dependency_overrides[auth_utils.require_auth] = fake_require_auth
    test_client = TestClient(app_instance, raise_server_exceptions=False)

    try:
        yield test_client
    finally:
        # Clean up so other tests see the real dependency
        app_instance.dependency_overrides.clear()
