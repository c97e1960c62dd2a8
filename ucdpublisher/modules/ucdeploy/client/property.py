"""Property sheet definition operations."""

from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import quote

from ucdpublisher.modules.ucdeploy.util.exceptions import UcdResponseException

from .base import UcdRestClient


class PropertyClient(UcdRestClient):
    @staticmethod
    def _prop_defs_path(prop_sheet_def_path: str) -> str:
        return f"/property/propSheetDef/{quote(prop_sheet_def_path, safe='')}.-1/propDefs"

    def get_prop_sheet_def_prop_defs(self, prop_sheet_def_path: str) -> List[Dict[str, Any]]:
        resp = self._request("GET", self._prop_defs_path(prop_sheet_def_path))
        payload = self._json(resp)
        if not isinstance(payload, list):
            raise UcdResponseException(
                f"Expected a list of property definitions for {prop_sheet_def_path}, got {type(payload).__name__}"
            )
        return payload

    def create_prop_def(
        self,
        prop_sheet_def_id: str,
        prop_sheet_def_path: str,
        name: str,
        description: str,
        label: str,
        required: bool,
        prop_type: str,
        value: str,
    ) -> Dict[str, Any]:
        body = {
            "definitionGroupId": prop_sheet_def_id,
            "name": name,
            "description": description,
            "label": label,
            "required": self._flag(required),
            "type": prop_type,
            "value": value,
        }
        resp = self._request("POST", self._prop_defs_path(prop_sheet_def_path), json=body)
        if not resp.content.strip():
            return {}
        return self._json(resp)
