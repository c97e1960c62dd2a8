"""UrbanCode Deploy version publishing module exports."""

from .service.manager import VersionPublishService
from .controller.router import router as ucdeploy_router

__all__ = ["VersionPublishService", "ucdeploy_router"]
