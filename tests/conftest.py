import asyncpg
import httpx
import pytest
import pytest_asyncio
from testcontainers.postgres import PostgresContainer

from postboard.app import create_app
from postboard.post_repository import PostRepository
from postboard.schema import create_schema, truncate_all
from postboard.user_repository import UserRepository


@pytest.fixture(scope="session")
def postgres_container():
    """Start a PostgreSQL test container for the session."""
    with PostgresContainer("postgres:17") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_dsn(postgres_container):
    host = postgres_container.get_container_host_ip()
    port = postgres_container.get_exposed_port(5432)
    return f"postgresql://{postgres_container.username}:{postgres_container.password}@{host}:{port}/{postgres_container.dbname}"


@pytest_asyncio.fixture
async def db_pool(postgres_dsn):
    """Create a database pool connected to the test container for each test."""
    # A new pool per test avoids sharing connections across event loops
    pool = await asyncpg.create_pool(postgres_dsn, min_size=1, max_size=5)
    await create_schema(pool)

    yield pool

    await truncate_all(pool)
    await pool.close()


@pytest.fixture
def post_repo(db_pool):
    return PostRepository(db_pool)


@pytest.fixture
def user_repo(db_pool):
    return UserRepository(db_pool)


@pytest_asyncio.fixture
async def client(db_pool):
    """HTTP client for an app that borrows the test pool."""
    app = create_app(pool=db_pool)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
