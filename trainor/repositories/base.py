from typing import Any, Dict, Generic, List, TypeVar

from postgrest.exceptions import APIError
from supabase import AsyncClient

from trainor.repositories.errors import RepoError
from trainor.utils.log import logger

T = TypeVar("T")


class SupabaseRepository(Generic[T]):
    """
    Base class for Supabase table repositories with common query/error handling.
    """

    table_name: str = ""

    def __init__(self, client: AsyncClient):
        self._client = client

    def _to_model(self, row: dict) -> T:
        """This should be overridden in subclasses"""
        raise NotImplementedError

    def _table(self, table_name: str | None = None):
        return self._client.table(table_name or self.table_name)

    async def _safe_query(self, query) -> List[dict]:
        """Execute a built select query and handle APIError"""
        try:
            response = await query.execute()
            return response.data or []
        except APIError as e:
            logger.exception(f"Supabase select on {self.table_name} failed")
            raise RepoError("Failed to query database") from e

    async def _safe_insert(
        self,
        payload: Dict[str, Any] | List[Dict[str, Any]],
        table_name: str | None = None,
    ) -> List[dict]:
        """Insert one or many rows and return them as stored"""
        table_name = table_name or self.table_name
        try:
            response = await self._table(table_name).insert(payload).execute()
            return response.data or []
        except APIError as e:
            logger.exception(f"Supabase insert into {table_name} failed")
            raise RepoError("Failed to write to database") from e

    async def _safe_update(
        self, match: Dict[str, Any], payload: Dict[str, Any]
    ) -> List[dict]:
        try:
            query = self._table().update(payload)
            for column, value in match.items():
                query = query.eq(column, value)
            response = await query.execute()
            return response.data or []
        except APIError as e:
            logger.exception(f"Supabase update on {self.table_name} failed")
            raise RepoError("Failed to update database") from e

    async def _safe_delete(self, match: Dict[str, Any]) -> None:
        try:
            query = self._table().delete()
            for column, value in match.items():
                query = query.eq(column, value)
            await query.execute()
        except APIError as e:
            logger.exception(f"Supabase delete on {self.table_name} failed")
            raise RepoError("Failed to delete from database") from e
