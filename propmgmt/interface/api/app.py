"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from propmgmt.config import Settings
from propmgmt.interface.api.errors import register_error_handlers
from propmgmt.interface.api.routes import agreements, apartments, deposits, health
from propmgmt.util.di import create_container
from propmgmt.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the DI container (and with it the engine) on shutdown."""
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; defaults to the production container

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Property Management API",
        description="CRUD API for apartments, deposits and rental agreements",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        # Let the frontend read Location and the alert headers
        expose_headers=[
            "Location",
            f"X-{settings.api.app_name}-alert",
            f"X-{settings.api.app_name}-error",
            f"X-{settings.api.app_name}-params",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_dishka(container or create_container(), app_instance)
    register_error_handlers(app_instance, settings.api)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(apartments.router, prefix=settings.api.base_path)
    app_instance.include_router(deposits.router, prefix=settings.api.base_path)
    app_instance.include_router(agreements.router, prefix=settings.api.base_path)

    return app_instance
