"""Shared plumbing for the UrbanCode Deploy REST clients."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ucdpublisher.modules.ucdeploy.util.exceptions import (
    UcdResponseException,
    UcdTransportException,
)
from ucdpublisher.settings import Settings


def build_http_client(settings: Settings) -> httpx.Client:
    """Create the ``httpx.Client`` every resource client shares."""
    auth = None
    if settings.ucd_username and settings.ucd_password:
        auth = (settings.ucd_username, settings.ucd_password)
    return httpx.Client(
        base_url=settings.ucd_url.rstrip("/"),
        auth=auth,
        timeout=settings.ucd_timeout,
        verify=settings.ucd_verify_ssl,
        headers={"Accept": "application/json"},
    )


class UcdRestClient:
    """Base class translating httpx failures into ``UcdAbortException`` subclasses."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client
        self.log = logging.getLogger(self.__class__.__name__)

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        self.log.debug("%s %s params=%s", method, path, kwargs.get("params"))
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            body = exc.response.text.strip()[:500]
            raise UcdTransportException(
                f"{method} {path} returned HTTP {exc.response.status_code}: {body or exc.response.reason_phrase}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UcdTransportException(f"{method} {path} failed: {exc}") from exc
        return response

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            snippet = response.text.strip()[:200]
            raise UcdResponseException(
                f"Invalid JSON from {response.request.method} {response.request.url.path}: {snippet!r}"
            ) from exc

    @staticmethod
    def _require(payload: Any, key: str, what: str) -> Any:
        if not isinstance(payload, dict) or payload.get(key) in (None, ""):
            raise UcdResponseException(f"{what} response is missing '{key}'")
        return payload[key]

    @staticmethod
    def _flag(value: Optional[bool]) -> str:
        return "true" if value else "false"
