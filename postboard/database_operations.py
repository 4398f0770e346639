import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import asyncpg

from postboard.db_context import DatabaseManager
from postboard.errors import StorageError

# Failures of a single statement: server-side errors, driver misuse or bad
# parameters, an unreachable server, or a pool acquire that timed out.
DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)

R = TypeVar("R")


class DatabaseOperations:
    """Composition class for database operations.

    Every call borrows one pooled connection for exactly one statement and
    returns it when the statement completes.
    """

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    async def _run(
        self, method: Callable[..., Awaitable[R]], query: str, params: list[Any]
    ) -> R:
        DatabaseManager.log_query(query, params)
        try:
            return await method(query, *params)
        except DRIVER_ERRORS as e:
            raise StorageError(query, f"{type(e).__name__}: {e}") from e

    async def fetch_all(self, query: str, params: list[Any]) -> list[Any]:
        """Execute query and fetch all rows"""
        return await self._run(self.pool.fetch, query, params)

    async def fetch_one(self, query: str, params: list[Any]) -> Any:
        """Execute a query and fetch one row, or None"""
        return await self._run(self.pool.fetchrow, query, params)

    async def execute_query(self, query: str, params: list[Any]) -> str:
        """Execute query and return the command status, e.g. ``DELETE 1``"""
        return await self._run(self.pool.execute, query, params)
