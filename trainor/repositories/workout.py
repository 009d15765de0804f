import math
from typing import List, Protocol

from trainor.models.workout import (
    Workout,
    WorkoutDraft,
    WorkoutExercise,
    WorkoutExerciseEntry,
    WorkoutExerciseInsert,
    WorkoutInsert,
)
from trainor.repositories.base import SupabaseRepository
from trainor.repositories.errors import (
    RepoError,
    WorkoutExercisesRepoError,
    WorkoutRepoError,
)
from trainor.utils.db import WORKOUT_EXERCISES_TABLE, WORKOUTS_TABLE
from trainor.utils.log import logger
from trainor.utils.taxonomy import hardest_level

DEFAULT_WORKOUT_CATEGORY = "full_body"


class WorkoutRepository(Protocol):
    async def create_with_exercises(
        self, user_id: str, draft: WorkoutDraft
    ) -> tuple[Workout, List[WorkoutExercise]]: ...
    async def delete_workout(self, workout_id: str) -> None: ...


def build_workout_insert(user_id: str, draft: WorkoutDraft) -> WorkoutInsert:
    """
    Map a composed workout onto a `workouts` row owned by user_id.
    """
    total_seconds = draft.total_duration or sum(e.duration for e in draft.exercises)
    difficulty = draft.difficulty_level or hardest_level(
        e.exercise.difficulty_level for e in draft.exercises
    )

    return WorkoutInsert(
        name=draft.name,
        description=draft.description,
        duration_minutes=math.ceil(total_seconds / 60),
        difficulty_level=difficulty,
        category=draft.category or DEFAULT_WORKOUT_CATEGORY,
        is_template=False,
        created_by=user_id,
    )


def build_exercise_inserts(
    workout_id: str, entries: List[WorkoutExerciseEntry]
) -> List[WorkoutExerciseInsert]:
    """
    One `workout_exercises` row per entry. order_index follows entry order,
    renumbered from 0 so gaps in `order` do not reach the database.
    """
    ordered = sorted(entries, key=lambda e: e.order)
    return [
        WorkoutExerciseInsert(
            workout_id=workout_id,
            exercise_id=entry.exercise.id,
            sets=entry.sets,
            reps=entry.reps,
            duration_seconds=entry.duration,
            rest_seconds=entry.rest_seconds,
            weight=entry.weight,
            notes=entry.notes,
            order_index=index,
        )
        for index, entry in enumerate(ordered)
    ]


class SupabaseWorkoutRepository(SupabaseRepository[Workout]):
    """
    Implementation of WorkoutRepository over the workouts and
    workout_exercises tables
    """

    table_name = WORKOUTS_TABLE

    def _to_model(self, row: dict) -> Workout:
        try:
            return Workout.model_validate(row)
        except Exception as e:
            logger.error(f"_to_model failed: {e}")
            raise WorkoutRepoError("Failed to create workout model from row") from e

    def _to_exercise_model(self, row: dict) -> WorkoutExercise:
        try:
            return WorkoutExercise.model_validate(row)
        except Exception as e:
            logger.error(f"_to_exercise_model failed: {e}")
            raise WorkoutExercisesRepoError(
                "Failed to create workout exercise model from row"
            ) from e

    async def _insert_exercises(
        self, workout_id: str, entries: List[WorkoutExerciseEntry]
    ) -> List[WorkoutExercise]:
        payload = [
            row.model_dump(mode="json")
            for row in build_exercise_inserts(workout_id, entries)
        ]
        if not payload:
            return []

        logger.debug(f"Writing {len(payload)} exercise rows for workout {workout_id}")

        try:
            rows = await self._safe_insert(payload, table_name=WORKOUT_EXERCISES_TABLE)
        except RepoError as e:
            raise WorkoutExercisesRepoError(
                "Failed to write workout exercises to database"
            ) from e

        return [self._to_exercise_model(row) for row in rows]

    # ----------------------- Add -----------------------------

    async def create_with_exercises(
        self, user_id: str, draft: WorkoutDraft
    ) -> tuple[Workout, List[WorkoutExercise]]:
        """
        Persist a workout and its exercise rows.

        If the exercise rows cannot be written the parent workout is deleted
        again so no half-saved workout is left behind.
        """
        logger.debug(f"Creating workout for {user_id} with name '{draft.name}'")

        insert = build_workout_insert(user_id, draft)

        try:
            rows = await self._safe_insert(insert.model_dump(mode="json"))
        except RepoError as e:
            logger.error(f"Failed to insert workout: {e}")
            raise WorkoutRepoError("Failed to create workout in database") from e

        if not rows:
            raise WorkoutRepoError("Workout insert returned no rows")

        workout = self._to_model(rows[0])
        logger.debug(f"New workout ID={workout.id}")

        try:
            exercises = await self._insert_exercises(workout.id, draft.exercises)
        except WorkoutExercisesRepoError:
            logger.warning(f"Rolling back workout {workout.id}")
            try:
                await self.delete_workout(workout.id)
            except RepoError:
                logger.exception(f"Rollback failed, workout {workout.id} left orphaned")
            raise

        return workout, exercises

    # ----------------------- Delete -----------------------------

    async def delete_workout(self, workout_id: str) -> None:
        """
        Delete a workout. Its workout_exercises rows go with it (FK cascade).
        """
        logger.debug(f"Deleting workout {workout_id}")

        try:
            await self._safe_delete({"id": workout_id})
        except RepoError as e:
            logger.error(f"Failed to delete workout: {e}")
            raise WorkoutRepoError("Failed to delete workout from database") from e
