"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.v1 import clients, engine, groups, policies, resources, roles, users
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.repositories.records import RecordStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.log_level, json_output=settings.log_json)
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV)
    yield
    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """Build the application with a fresh, empty record store."""
    app = FastAPI(
        title="Authorization Service API",
        description="Policies, roles, resources, users, groups and clients",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = RecordStore()

    register_exception_handlers(app)

    app.include_router(policies.router, prefix=settings.API_PREFIX)
    app.include_router(roles.router, prefix=settings.API_PREFIX)
    app.include_router(resources.router, prefix=settings.API_PREFIX)
    app.include_router(users.router, prefix=settings.API_PREFIX)
    app.include_router(groups.router, prefix=settings.API_PREFIX)
    app.include_router(clients.router, prefix=settings.API_PREFIX)
    app.include_router(engine.router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Public health-check endpoint."""
        return {"status": "ok", "env": settings.APP_ENV}

    return app


app = create_app()
