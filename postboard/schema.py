"""
Table definitions for a fresh database. This is a convenience for local
setups and tests, not a migration tool: existing tables are left untouched.
"""

import asyncpg

from postboard.logger import get_logger

logger = get_logger(__name__)

USERS_TABLE = """
    CREATE TABLE IF NOT EXISTS users (
        id SERIAL PRIMARY KEY,
        username TEXT NOT NULL,
        email TEXT NOT NULL
    );
"""

POSTS_TABLE = """
    CREATE TABLE IF NOT EXISTS posts (
        id SERIAL PRIMARY KEY,
        user_id INTEGER REFERENCES users (id),
        title TEXT NOT NULL,
        body TEXT NOT NULL
    );
"""


async def create_schema(pool: asyncpg.Pool) -> None:
    """Create the users and posts tables if they don't exist."""
    async with pool.acquire() as conn:
        await conn.execute(USERS_TABLE)
        await conn.execute(POSTS_TABLE)
    logger.info("users and posts tables ready")


async def truncate_all(pool: asyncpg.Pool) -> None:
    """Remove every row and reset the id sequences."""
    async with pool.acquire() as conn:
        await conn.execute("TRUNCATE TABLE posts, users RESTART IDENTITY CASCADE;")
