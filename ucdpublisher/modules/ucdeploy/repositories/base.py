"""Repository contract for the global build environment store."""

from __future__ import annotations

from typing import Dict, Optional


class GlobalEnvRepository:
    """Global key/value variables shared by every build on the runtime."""

    def put(self, key: str, value: str) -> None:
        raise NotImplementedError

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def get_all(self) -> Dict[str, str]:
        raise NotImplementedError
