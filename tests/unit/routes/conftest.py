from typing import Callable

import pytest

from trainor.models.profile import Profile, ProfileUpdate
from trainor.repositories.errors import ProfileNotFoundError, ProfileRepoError
from trainor.routes import auth as auth_routes
from trainor.routes import exercise as exercise_routes
from trainor.routes import profile as profile_routes
from trainor.routes import workout as workout_routes
from trainor.services.auth import AuthService
from trainor.services.workout import WorkoutService
from tests.fakes import FakeAuth, FakeSupabaseClient
from tests.test_data import EXERCISE_ROWS, PROFILE_ROW

# ---------------- Auth --------------------


@pytest.fixture
def fake_auth(app_instance):
    """
    Override both auth service getters with one AuthService over a FakeAuth.

    Usage:
        auth = fake_auth(fail_on={"sign_in_with_password"})
    """

    def _make(**kwargs) -> FakeAuth:
        auth = FakeAuth(**kwargs)
        service = AuthService(FakeSupabaseClient(auth=auth))
        app_instance.dependency_overrides[auth_routes.get_auth_service] = lambda: service
        app_instance.dependency_overrides[auth_routes.get_session_auth_service] = (
            lambda: service
        )
        return auth

    try:
        yield _make
    finally:
        app_instance.dependency_overrides.pop(auth_routes.get_auth_service, None)
        app_instance.dependency_overrides.pop(auth_routes.get_session_auth_service, None)


# ---------------- Exercise catalog --------------------


@pytest.fixture
def fake_catalog(app_instance, make_client):
    """
    Override get_catalog_service() with a service over an in-memory catalog.
    """

    def _make(rows=EXERCISE_ROWS, fail: bool = False) -> FakeSupabaseClient:
        client = make_client(
            exercises=rows, fail_on={"exercises": {"select"}} if fail else None
        )
        service = WorkoutService(client)
        app_instance.dependency_overrides[exercise_routes.get_catalog_service] = (
            lambda: service
        )
        return client

    try:
        yield _make
    finally:
        app_instance.dependency_overrides.pop(exercise_routes.get_catalog_service, None)


# ---------------- Workout --------------------


@pytest.fixture
def fake_workout_backend(app_instance, make_client, signed_in_auth):
    """
    Override get_workout_service() with a service over in-memory tables.
    Pass auth=FakeAuth() for a caller the backend does not recognise.
    """

    def _make(*, auth: FakeAuth | None = None, fail_on=None) -> FakeSupabaseClient:
        client = make_client(
            auth=auth or signed_in_auth,
            workouts=[],
            workout_exercises=[],
            fail_on=fail_on,
        )
        service = WorkoutService(client)
        app_instance.dependency_overrides[workout_routes.get_workout_service] = (
            lambda: service
        )
        return client

    try:
        yield _make
    finally:
        app_instance.dependency_overrides.pop(workout_routes.get_workout_service, None)


# ----------------------- Profile ------------------------


class FakeProfileRepo:
    def __init__(
        self,
        profile: Profile | None = None,
        *,
        raise_on_get: bool = False,
        raise_on_update: Exception | None = None,
    ):
        self._profile = profile
        self._raise_on_get = raise_on_get
        self._raise_on_update = raise_on_update

        self.calls: list[tuple[str, str, ProfileUpdate | None]] = []

    async def get_for_user(self, user_id: str) -> Profile | None:
        self.calls.append(("get", user_id, None))
        if self._raise_on_get:
            raise ProfileRepoError("boom")
        return self._profile

    async def update_for_user(self, user_id: str, changes: ProfileUpdate) -> Profile:
        self.calls.append(("update", user_id, changes))
        if self._raise_on_update:
            raise self._raise_on_update
        if self._profile is None:
            raise ProfileNotFoundError(f"No profile for {user_id}")
        return self._profile.model_copy(update=changes.model_dump(exclude_unset=True))


@pytest.fixture
def stored_profile() -> Profile:
    return Profile.model_validate(PROFILE_ROW)


@pytest.fixture
def fake_profile_repo(app_instance) -> Callable[..., FakeProfileRepo]:
    """
    Override get_profile_repo() for the duration of a test.
    """

    def _make(**kwargs) -> FakeProfileRepo:
        repo = FakeProfileRepo(**kwargs)
        app_instance.dependency_overrides[profile_routes.get_profile_repo] = (
            lambda: repo
        )
        return repo

    try:
        yield _make
    finally:
        app_instance.dependency_overrides.pop(profile_routes.get_profile_repo, None)
