"""In-memory environment store."""

from __future__ import annotations

from typing import Dict, Optional

from ucdpublisher.modules.ucdeploy.repositories.base import GlobalEnvRepository


class InMemoryGlobalEnvRepository(GlobalEnvRepository):
    """Process-local storage so the service runs without a database."""

    def __init__(self) -> None:
        self.values: Dict[str, str] = {}

    def put(self, key: str, value: str) -> None:
        self.values[key] = value

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def get_all(self) -> Dict[str, str]:
        return dict(self.values)
