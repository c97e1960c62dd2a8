"""Component resource operations."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from ucdpublisher.modules.ucdeploy.util.exceptions import UcdTransportException

from .base import UcdRestClient


class ComponentClient(UcdRestClient):
    def get_component_info(self, component: str) -> Dict[str, Any]:
        resp = self._request("GET", "/cli/component/info", params={"component": component})
        return self._json(resp)

    def get_component_uuid(self, component: str) -> str:
        return str(self._require(self.get_component_info(component), "id", "Component info"))

    def component_exists(self, component: str) -> bool:
        try:
            self.get_component_info(component)
        except UcdTransportException as exc:
            cause = exc.__cause__
            # the CLI endpoints answer 400 or 404 for an unknown component
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code in (400, 404):
                return False
            raise
        return True

    def create_component(
        self,
        name: str,
        *,
        description: str = "",
        source_config_plugin: str = "",
        default_version_type: str = "FULL",
        template_name: str = "",
        template_version: int = -1,
        import_automatically: bool = False,
        use_vfs: bool = True,
        properties: Optional[Mapping[str, str]] = None,
    ) -> str:
        body: Dict[str, Any] = {
            "name": name,
            "description": description,
            "sourceConfigPlugin": source_config_plugin,
            "defaultVersionType": default_version_type,
            "importAutomatically": self._flag(import_automatically),
            "useVfs": self._flag(use_vfs),
            "properties": dict(properties or {}),
        }
        if template_name:
            body["templateName"] = template_name
            body["templateVersion"] = template_version
        resp = self._request("PUT", "/cli/component/create", json=body)
        return str(self._require(self._json(resp), "id", "Create component"))

    def add_tag_to_component(self, component: str, tag: str) -> None:
        self._request("PUT", "/cli/component/tag", params={"component": component, "tag": tag})

    def add_component_version_link(self, component: str, version: str, link_name: str, link: str) -> None:
        self._request(
            "PUT",
            "/cli/version/addLink",
            params={"component": component, "version": version, "linkName": link_name, "link": link},
        )

    def get_component_version_prop_sheet_def(self, component: str) -> Dict[str, Any]:
        component_id = self.get_component_uuid(component)
        resp = self._request("GET", f"/rest/deploy/component/{component_id}/versionPropSheetDef")
        return self._json(resp)

    def import_component_versions(self, component: str, properties: Mapping[str, str]) -> Dict[str, Any]:
        component_id = self.get_component_uuid(component)
        resp = self._request(
            "PUT",
            f"/rest/deploy/component/{component_id}/integrate",
            json={"properties": dict(properties)},
        )
        if not resp.content.strip():
            return {}
        return self._json(resp)
