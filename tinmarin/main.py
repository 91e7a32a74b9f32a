"""TinMarin API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TinMarinError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage client built, connected and disposed in the lifespan; an unreachable
      database at startup ends the process

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - DatabaseSessionManager kept on app.state and injected via api/dependencies.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tinmarin.api.error_handlers import register_error_handlers
from tinmarin.api.routes import faq, health, recommended_websites, suggestion_types
from tinmarin.config import get_settings
from tinmarin.infrastructure.database import DatabaseSessionManager
from tinmarin.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager.from_url(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await db_manager.connect(create_schema=settings.database_create_schema)
    app.state.db_manager = db_manager
    logger.info("TinMarin API started")
    yield
    logger.info("TinMarin API shutting down")
    app.state.db_manager = None
    await db_manager.dispose()


app = FastAPI(
    title="TinMarin API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(faq.router)
app.include_router(recommended_websites.router)
app.include_router(suggestion_types.router)

register_error_handlers(app)
