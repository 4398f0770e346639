import asyncio

import click
import uvicorn

from postboard.app import create_app
from postboard.config import Settings, load_settings
from postboard.db_context import DatabaseManager
from postboard.errors import ConfigError
from postboard.logger import configure_logging, get_logger
from postboard.schema import create_schema

logger = get_logger(__name__)


def _load_settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@click.group(help="postboard: posts and users over HTTP")
def cli() -> None:
    pass


@cli.command(help="Run the HTTP server.")
@click.option("--host", default=None, help="Override HOST.")
@click.option("--port", type=int, default=None, help="Override PORT.")
def serve(host: str | None, port: int | None) -> None:
    settings = _load_settings()
    overrides = {k: v for k, v in {"host": host, "port": port}.items() if v is not None}
    settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info(f"Server is running on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


@cli.command("init-schema", help="Create the users and posts tables if missing.")
def init_schema() -> None:
    settings = _load_settings()
    configure_logging(settings.log_level)

    async def run() -> None:
        pool = await DatabaseManager.create_pool(settings)
        try:
            await create_schema(pool)
        finally:
            await DatabaseManager.close_pool(pool)

    asyncio.run(run())


def main() -> None:
    cli()
