import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.api.errors import register_exception_handlers
from src.app.api.routers import users
from src.app.config import get_settings
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging(get_settings().logging)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - ensures the users table exists on startup."""
    container: Container = app.state.container
    config = container.config()
    logger.info("Starting %s...", config.app_name)

    db = container.database()
    if config.database.create_tables_on_startup:
        await db.create_tables()
        logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down %s...", config.app_name)
    await db.dispose()


def create_app(container: Container, lifespan=default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing services and the database.
        lifespan: Optional lifespan context manager. Defaults to default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=["src.app.api.routers.users"])

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(users.router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {config.app_name}"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app

container = Container()
app = create_app(container=container)
