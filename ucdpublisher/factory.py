"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .settings import get_settings
from ucdpublisher.modules.ucdeploy import ucdeploy_router


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    services = ServiceContainer(settings)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.include_router(health_router)
    app.include_router(ucdeploy_router)
    app.state.container = services

    @app.on_event("shutdown")
    def _shutdown() -> None:  # pragma: no cover - invoked by FastAPI
        services.close()

    return app
