"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api import auth, todos, users
from src.config import get_settings
from src.database import Database
from src.errors import register_exception_handlers

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(database: Database | None = None) -> FastAPI:
    """Build the application around a persistence handle.

    The handle is connected at startup (an unreachable database aborts the
    process) and disposed at shutdown.
    """
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        database.connect()
        database.create_all()
        app.state.database = database
        yield
        database.dispose()

    app = FastAPI(
        title="Todo API",
        description="Todo list API with bearer-token authentication",
        version="0.1.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Register routers
    app.include_router(auth.router)
    app.include_router(todos.router)
    app.include_router(users.router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
