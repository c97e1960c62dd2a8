"""Application resource operations."""

from __future__ import annotations

from .base import UcdRestClient


class ApplicationClient(UcdRestClient):
    def add_component_to_application(self, application: str, component: str) -> None:
        self._request(
            "PUT",
            "/cli/application/addComponentToApp",
            params={"component": component, "application": application},
        )
