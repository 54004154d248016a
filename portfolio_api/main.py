"""Portfolio API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PortfolioError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager constructed in the lifespan and stored on app.state.db
    - A failed startup connectivity check is logged, never fatal: requests
      fail with 500 until the database is reachable again

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Manager on app.state instead of a module global: tests assign their own
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_api.api.error_handlers import register_error_handlers
from portfolio_api.api.routes import about, contact_messages, experiences, health, projects
from portfolio_api.config import get_settings
from portfolio_api.infrastructure.database import DatabaseSessionManager
from portfolio_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.get_database_url(),
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    app.state.db = db_manager

    if settings.database_create_tables:
        try:
            await db_manager.create_all()
        except Exception as e:
            logger.error(f"Table bootstrap failed: {e}")

    if await db_manager.health_check():
        logger.info("Connected to database")
    else:
        logger.error("Database connection failed; serving anyway")

    logger.info(f"Portfolio API started on port {settings.port}")
    yield
    await db_manager.dispose()
    logger.info("Portfolio API shutting down")


app = FastAPI(
    title="Portfolio API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(projects.router)
app.include_router(about.router)
app.include_router(contact_messages.contact_router)
app.include_router(contact_messages.router)
app.include_router(experiences.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
