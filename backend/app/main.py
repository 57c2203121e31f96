"""TLA Backend API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TLAError → structured JSON responses
    - CORS preflight policy built from settings (not hardcoded)
    - Middleware order, outermost first: request logging → CORS preflight → routes
    - Database initialized on startup via lifespan context manager (SQL store only)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, users, classes, programs
from app.config import get_settings
from app.infrastructure.database import init_db, close_db
from app.infrastructure.observability import setup_logging
from app.middleware.cors import PreflightCORSMiddleware
from app.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.document_store == "sql":
        init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    logger.info(f"TLA API started ({settings.document_store} document store)")
    yield
    await close_db()
    logger.info("TLA API shutting down")


app = FastAPI(
    title="TLA API", version="1.0.0", lifespan=lifespan,
)

# add_middleware wraps: the last one added is the outermost
settings = get_settings()
app.add_middleware(PreflightCORSMiddleware, config=settings.cors_config())
if settings.request_logging:
    app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(classes.router)
app.include_router(programs.router)

register_error_handlers(app)
