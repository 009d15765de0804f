from typing import Protocol

from trainor.models.profile import Profile, ProfileUpdate
from trainor.repositories.base import SupabaseRepository
from trainor.repositories.errors import (
    ProfileNotFoundError,
    ProfileRepoError,
    RepoError,
)
from trainor.utils import dates
from trainor.utils.db import PROFILES_TABLE
from trainor.utils.log import logger


class ProfileRepository(Protocol):
    async def get_for_user(self, user_id: str) -> Profile | None: ...
    async def update_for_user(self, user_id: str, changes: ProfileUpdate) -> Profile: ...


class SupabaseProfileRepository(SupabaseRepository[Profile]):
    """
    Repository for the user profile
    """

    table_name = PROFILES_TABLE

    def _to_model(self, row: dict) -> Profile:
        try:
            return Profile.model_validate(row)
        except Exception as e:
            logger.error(f"_to_model failed for profile: {e}")
            raise ProfileRepoError("Failed to create profile model from row") from e

    async def get_for_user(self, user_id: str) -> Profile | None:
        query = self._table().select("*").eq("id", user_id).limit(1)

        try:
            rows = await self._safe_query(query)
        except RepoError as e:
            logger.error(f"Repo error fetching profile for {user_id}: {e}")
            raise ProfileRepoError("Failed to fetch profile from database") from e

        if not rows:
            logger.warning(f"User profile not found for user_id={user_id}")
            return None

        return self._to_model(rows[0])

    async def update_for_user(self, user_id: str, changes: ProfileUpdate) -> Profile:
        payload = changes.to_payload()
        if not payload:
            logger.debug("Empty profile update, returning current profile")
            current = await self.get_for_user(user_id)
            if current is None:
                raise ProfileNotFoundError(f"No profile for user {user_id}")
            return current

        payload["updated_at"] = dates.dt_to_iso(dates.now())

        try:
            rows = await self._safe_update({"id": user_id}, payload)
        except RepoError as e:
            logger.error(f"Repo error updating profile user_id={user_id}: {e}")
            raise ProfileRepoError("Failed to update profile") from e

        if not rows:
            raise ProfileNotFoundError(f"Profile update matched no row for {user_id}")

        return self._to_model(rows[0])
