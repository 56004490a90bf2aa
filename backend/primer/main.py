"""Primer API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PrimerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One ModelRegistry per app, created in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Registry on app.state instead of a module global: lifetime tied to the
      application, replaceable in tests
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from primer.api.error_handlers import register_error_handlers
from primer.api.routes import arrays, calculator, cipher, health, models, text
from primer.config import get_settings
from primer.core.registry import ModelRegistry
from primer.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.service_name)
    app.state.registry = ModelRegistry(settings.default_model_name)
    logger.info("Primer API started")
    yield
    app.state.registry.delete_all_models()
    logger.info("Primer API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Primer API", version=settings.service_version, lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health.router)
    application.include_router(text.router)
    application.include_router(calculator.router)
    application.include_router(cipher.router)
    application.include_router(arrays.router)
    application.include_router(models.router)

    register_error_handlers(application)
    return application


app = create_app()
