import re
from typing import List, Protocol

from trainor.models.exercise import Exercise, ExerciseFilters
from trainor.repositories.base import SupabaseRepository
from trainor.repositories.errors import ExerciseRepoError, RepoError
from trainor.utils.db import EXERCISES_TABLE
from trainor.utils.log import logger

# characters with meaning inside a PostgREST or=(...) expression
FILTER_GRAMMAR = re.compile(r"[,()]")


class ExerciseRepository(Protocol):
    async def get_all(self) -> List[Exercise]: ...
    async def get_filtered(self, filters: ExerciseFilters) -> List[Exercise]: ...


def build_search_expression(term: str) -> str:
    """
    Build the or-filter matching `term` anywhere in name or description.
    Example: "push" -> "name.ilike.%push%,description.ilike.%push%"
    """
    cleaned = FILTER_GRAMMAR.sub("", term).strip()
    return f"name.ilike.%{cleaned}%,description.ilike.%{cleaned}%"


class SupabaseExerciseRepository(SupabaseRepository[Exercise]):
    """
    Read access to the shared exercise catalog
    """

    table_name = EXERCISES_TABLE

    def _to_model(self, row: dict) -> Exercise:
        try:
            return Exercise.model_validate(row)
        except Exception as e:
            logger.error(f"_to_model failed for exercise: {e}")
            raise ExerciseRepoError("Failed to create exercise model from row") from e

    async def get_all(self) -> List[Exercise]:
        """
        Return the whole catalog ordered by name
        """
        query = self._table().select("*").order("name")

        try:
            rows = await self._safe_query(query)
        except RepoError as e:
            raise ExerciseRepoError("Failed to get all exercises") from e

        logger.debug(f"{len(rows)} exercises returned")
        return [self._to_model(row) for row in rows]

    async def get_filtered(self, filters: ExerciseFilters) -> List[Exercise]:
        """
        Return catalog entries matching every filter that is set, ordered by name
        """
        active = filters.active()
        logger.debug(f"Filtering exercises with {active}")

        query = self._table().select("*")

        if "muscle_group" in active:
            query = query.contains("muscle_groups", [active["muscle_group"]])
        if "difficulty" in active:
            query = query.eq("difficulty_level", active["difficulty"])
        if "equipment" in active:
            query = query.eq("equipment_needed", active["equipment"])
        if "search" in active:
            query = query.or_(build_search_expression(active["search"]))

        query = query.order("name")

        try:
            rows = await self._safe_query(query)
        except RepoError as e:
            raise ExerciseRepoError("Failed to filter exercises") from e

        logger.debug(f"{len(rows)} exercises matched")
        return [self._to_model(row) for row in rows]
