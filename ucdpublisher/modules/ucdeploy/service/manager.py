"""Service facade used by the HTTP layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ucdpublisher.modules.ucdeploy.client import (
    ApplicationClient,
    ComponentClient,
    PropertyClient,
    VersionClient,
    build_http_client,
)
from ucdpublisher.modules.ucdeploy.domain import VersionBlock
from ucdpublisher.modules.ucdeploy.repositories import GlobalEnvRepository
from ucdpublisher.modules.ucdeploy.service.version_helper import VersionHelper
from ucdpublisher.modules.ucdeploy.util import EnvVars
from ucdpublisher.modules.ucdeploy.util.exceptions import UcdAbortException
from ucdpublisher.settings import Settings

log = logging.getLogger(__name__)


@dataclass
class OperationResult:
    ok: bool
    message: str
    data: Any = None

    def as_dict(self) -> Dict[str, Any]:
        payload = {"status": "true" if self.ok else "false", "msg": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class VersionPublishService:
    """Runs one version workflow per request against the configured server."""

    def __init__(
        self,
        settings: Settings,
        env_store: Optional[GlobalEnvRepository] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings
        self.env_store = env_store
        self._client = client or build_http_client(settings)
        self.app_client = ApplicationClient(self._client)
        self.component_client = ComponentClient(self._client)
        self.property_client = PropertyClient(self._client)
        self.version_client = VersionClient(self._client)

    def _helper(self, env: Optional[Dict[str, Any]], messages: List[str]) -> VersionHelper:
        env_vars = EnvVars({str(k): str(v) for k, v in (env or {}).items()})
        if self.env_store is not None:
            # values recorded by earlier runs are visible as placeholders
            try:
                recorded = self.env_store.get_all()
            except Exception as exc:  # noqa: BLE001
                log.warning("Could not load global environment variables: %s", exc)
                messages.append("[Warning] Global environment variables are unavailable, using request env only.")
                recorded = {}
            for key, value in recorded.items():
                env_vars.setdefault(key, value)
        return VersionHelper(
            self.app_client,
            self.component_client,
            self.property_client,
            self.version_client,
            env_vars,
            self.env_store,
            status_callback=messages.append,
        )

    def create_version(self, payload: Dict[str, Any]) -> OperationResult:
        raw_block = payload.get("version")
        if not isinstance(raw_block, dict):
            return OperationResult(False, "version must be an object")
        try:
            block = VersionBlock.from_dict(raw_block)
        except ValueError as exc:
            return OperationResult(False, str(exc))

        link_name = payload.get("linkName") or payload.get("link_name") or self.settings.ucd_default_link_name
        link_url = payload.get("linkUrl") or payload.get("link_url") or ""
        messages: List[str] = []
        try:
            result = self._helper(payload.get("env"), messages).create_version(block, link_name, link_url)
        except UcdAbortException as exc:
            log.warning("Version creation failed for %s: %s", block.component_name, exc)
            return OperationResult(False, str(exc), {"messages": messages})
        data = result.as_dict()
        data["messages"] = messages
        return OperationResult(True, "ok", data)

    def upload_files(self, payload: Dict[str, Any]) -> OperationResult:
        required = ["baseDir", "component", "version"]
        missing = [key for key in required if not payload.get(key)]
        if missing:
            return OperationResult(False, f"Missing parameters: {', '.join(missing)}")
        messages: List[str] = []
        helper = self._helper(payload.get("env"), messages)
        try:
            count = helper.upload_version_files(
                helper.env_vars.expand(payload["baseDir"]),
                helper.env_vars.expand(payload["component"]),
                helper.env_vars.expand(payload["version"]),
                helper.env_vars.expand(payload.get("fileIncludePatterns") or ""),
                helper.env_vars.expand(payload.get("fileExcludePatterns") or ""),
            )
        except UcdAbortException as exc:
            log.warning("Upload to %s:%s failed: %s", payload["component"], payload["version"], exc)
            return OperationResult(False, str(exc), {"messages": messages})
        return OperationResult(True, "ok", {"uploaded": count, "messages": messages})

    def close(self) -> None:
        self._client.close()
