from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any, NamedTuple

import asyncpg

from postboard.config import Settings
from postboard.logger import get_logger

logger = get_logger(__name__)


class QueryLog(NamedTuple):
    query: str
    params: list[Any]


class QueryTracker:
    """Records the statements executed while it is enabled"""

    def __init__(self):
        self._queries: list[QueryLog] = []
        self._enabled = False

    def enable(self):
        self._enabled = True

    def log_query(self, query: str, params: list[Any]):
        if self._enabled:
            self._queries.append(QueryLog(query, list(params)))

    def get_queries(self) -> list[QueryLog]:
        return self._queries.copy()

    def count(self) -> int:
        return len(self._queries)


_query_tracker: ContextVar[QueryTracker | None] = ContextVar(
    "query_tracker", default=None
)


class DatabaseManager:
    """Creates the shared connection pool and records executed queries"""

    @classmethod
    async def create_pool(cls, settings: Settings) -> asyncpg.Pool:
        """Open the process-wide pool.

        Raises:
            asyncpg.PostgresError, OSError: The database is unreachable or
                rejected the connection.
        """
        try:
            pool = await asyncpg.create_pool(
                settings.database_url,
                min_size=settings.pool_min_size,
                max_size=settings.pool_max_size,
            )
        except (asyncpg.PostgresError, OSError) as e:
            logger.error(f"Failed to connect to the database: {e}")
            raise
        logger.info("Connected to the database!")
        return pool

    @classmethod
    async def close_pool(cls, pool: asyncpg.Pool) -> None:
        await pool.close()
        logger.info("Database connection pool closed.")

    @classmethod
    def get_query_tracker(cls) -> QueryTracker | None:
        return _query_tracker.get()

    @classmethod
    def log_query(cls, query: str, params: list[Any]):
        """Log a query to the debug log and to the current query tracker if available"""
        logger.debug(f"Executing {query} with {len(params)} parameter(s)")
        tracker = _query_tracker.get()
        if tracker is not None:
            tracker.log_query(query, params)

    @classmethod
    @asynccontextmanager
    async def track_queries(cls):
        """Context manager for query tracking; nested calls share one tracker.

        async with DatabaseManager.track_queries() as tracker:
            await post_repo.find_by_id(post_id)
            assert tracker.count() == 1
        """
        current_tracker = _query_tracker.get()
        if current_tracker is not None:
            yield current_tracker
            return

        tracker = QueryTracker()
        tracker.enable()
        token = _query_tracker.set(tracker)
        try:
            yield tracker
        finally:
            _query_tracker.reset(token)
