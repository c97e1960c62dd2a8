"""Wiring of settings, repositories and services."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ucdpublisher.modules.ucdeploy import VersionPublishService
from ucdpublisher.modules.ucdeploy.repositories import GlobalEnvRepository, InMemoryGlobalEnvRepository
from .settings import Settings

log = logging.getLogger(__name__)


def build_env_store(settings: Settings) -> GlobalEnvRepository:
    backend = (settings.env_store or "memory").strip().lower()
    if backend == "mysql":
        from ucdpublisher.modules.ucdeploy.repositories.mysql import MySQLGlobalEnvRepository

        return MySQLGlobalEnvRepository(settings)
    if backend != "memory":
        log.warning("Unknown ENV_STORE %r, falling back to in-memory store", settings.env_store)
    return InMemoryGlobalEnvRepository()


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    env_store: GlobalEnvRepository = field(init=False)
    publish_service: VersionPublishService = field(init=False)

    def __post_init__(self) -> None:
        self.env_store = build_env_store(self.settings)
        self.publish_service = VersionPublishService(self.settings, env_store=self.env_store)
        log.info("Publishing to %s using %s env store", self.settings.ucd_url, type(self.env_store).__name__)

    def close(self) -> None:
        self.publish_service.close()
