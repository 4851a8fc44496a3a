"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventflow.config import Settings
from eventflow.interface.api.routes import collab, health
from eventflow.util.di.container import create_container, setup_di
from eventflow.util.observability import instrument_fastapi, instrument_httpx

# Frontend dev servers allowed alongside the deployed frontend
DEV_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Disposes the engine and any other APP-scoped resources
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire should already be configured (``scripts/start_app.py`` does it);
    instrumentation is a no-op otherwise.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()
    instrument_httpx()

    app_instance = FastAPI(
        title="EventFlow API",
        description="Collaboration invites for EventFlow events",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)

    # Credentialed CORS: the frontend sends the session and invite cookies
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.app.base_url.rstrip("/"), *DEV_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(collab.router)
    return app_instance


# Imported by uvicorn via scripts/start_app.py
app = create_app()
