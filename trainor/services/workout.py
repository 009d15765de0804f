from typing import Iterable, List

from supabase import AsyncClient

from trainor.models.exercise import Exercise, ExerciseFilters
from trainor.models.workout import SavedWorkout, WorkoutDraft, WorkoutExerciseEntry
from trainor.repositories.exercise import ExerciseRepository, SupabaseExerciseRepository
from trainor.repositories.workout import SupabaseWorkoutRepository, WorkoutRepository
from trainor.services.result import NOT_AUTHENTICATED, Result, remote_error
from trainor.utils import dates
from trainor.utils.log import logger


def calculate_total_duration(exercises: Iterable[WorkoutExerciseEntry]) -> int:
    return sum(entry.duration for entry in exercises)


class WorkoutService:
    """
    Exercise catalog reads and workout persistence.

    Nothing here raises: failures come back as Result(success=False).
    """

    calculate_total_duration = staticmethod(calculate_total_duration)
    format_duration = staticmethod(dates.format_duration)
    parse_time_input = staticmethod(dates.parse_time_input)

    def __init__(
        self,
        client: AsyncClient,
        access_token: str | None = None,
        exercise_repo: ExerciseRepository | None = None,
        workout_repo: WorkoutRepository | None = None,
    ):
        self._client = client
        self._access_token = access_token
        self._exercise_repo = exercise_repo or SupabaseExerciseRepository(client)
        self._workout_repo = workout_repo or SupabaseWorkoutRepository(client)

    async def _current_user(self):
        """
        The authenticated caller, or None. A failed lookup counts as
        not authenticated.
        """
        try:
            response = await self._client.auth.get_user(self._access_token)
        except Exception as e:
            logger.warning(f"Could not resolve current user: {e}")
            return None
        return getattr(response, "user", None) if response else None

    # ---------------------- Catalog ---------------------------

    async def get_exercises(self) -> Result[List[Exercise]]:
        try:
            exercises = await self._exercise_repo.get_all()
        except Exception as e:
            logger.error(f"Error fetching exercises: {e}")
            return Result.fail(remote_error(e))
        return Result.ok(exercises)

    async def get_filtered_exercises(
        self, filters: ExerciseFilters | dict | None = None
    ) -> Result[List[Exercise]]:
        try:
            if not isinstance(filters, ExerciseFilters):
                filters = ExerciseFilters.model_validate(filters or {})
            exercises = await self._exercise_repo.get_filtered(filters)
        except Exception as e:
            logger.error(f"Error filtering exercises: {e}")
            return Result.fail(remote_error(e))
        return Result.ok(exercises)

    # ---------------------- Workouts ---------------------------

    async def save_workout(self, workout: WorkoutDraft) -> Result[SavedWorkout]:
        user = await self._current_user()
        if user is None:
            return Result.fail(NOT_AUTHENTICATED)

        logger.info(f"Saving workout '{workout.name}' for user {user.id}")

        total = workout.total_duration or calculate_total_duration(workout.exercises)
        draft = workout.model_copy(update={"total_duration": total})

        try:
            saved, rows = await self._workout_repo.create_with_exercises(user.id, draft)
        except Exception as e:
            logger.error(f"Error saving workout: {e}")
            return Result.fail(remote_error(e))

        logger.debug(f"Workout {saved.id} saved with {len(rows)} exercises")

        return Result.ok(
            SavedWorkout(
                id=saved.id,
                name=saved.name,
                description=saved.description,
                exercises=draft.ordered_exercises(),
                total_duration=total,
                created_at=saved.created_at,
                user_id=user.id,
            )
        )
