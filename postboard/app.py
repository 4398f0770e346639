from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request, Response

from postboard.config import Settings
from postboard.db_context import DatabaseManager
from postboard.errors import HandlerError
from postboard.handlers import router


def create_app(settings: Settings | None = None, pool: asyncpg.Pool | None = None) -> FastAPI:
    """Build the application.

    With ``pool`` given, the caller owns it and the lifespan neither opens nor
    closes one. Otherwise the pool is opened from ``settings`` at startup and
    closed at shutdown.
    """
    if settings is None and pool is None:
        raise ValueError("create_app() needs settings or an existing pool")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if pool is not None:
            yield
            return
        app.state.pool = await DatabaseManager.create_pool(settings)
        try:
            yield
        finally:
            await DatabaseManager.close_pool(app.state.pool)

    app = FastAPI(title="postboard", lifespan=lifespan)
    app.state.pool = pool
    app.include_router(router)

    @app.exception_handler(HandlerError)
    async def handler_error(request: Request, exc: HandlerError) -> Response:
        return Response(status_code=exc.status_code)

    return app
