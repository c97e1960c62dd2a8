"""Synchronise version properties against a component's property sheet."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from ucdpublisher.modules.ucdeploy.client import ComponentApi, PropertyApi, VersionApi
from ucdpublisher.modules.ucdeploy.domain import PropDef, PropSheetDef
from ucdpublisher.modules.ucdeploy.util.exceptions import (
    UcdAbortException,
    UcdResponseException,
    UcdTransportException,
)

log = logging.getLogger(__name__)


class PropertyReconciler:
    """Update values of existing property definitions, create the missing ones.

    Definitions are always re-fetched from the server; nothing is cached
    between runs. The caller's mapping is partitioned, never mutated: names
    with a matching definition are updated first (in definition order), the
    rest get a new ``TEXT`` definition and then their value.
    """

    def __init__(
        self,
        component_client: ComponentApi,
        property_client: PropertyApi,
        version_client: VersionApi,
        *,
        status_callback: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.component_client = component_client
        self.property_client = property_client
        self.version_client = version_client
        self.status_callback = status_callback

    def reconcile(self, component: str, version: str, properties: Mapping[str, str]) -> None:
        if not properties:
            return

        sheet, existing_names = self._load_definitions(component)
        updates, creates = self.partition(existing_names, properties)

        for name, value in updates:
            self._notify(f"Updating version property '{name}' to '{value}'")
            try:
                self.version_client.set_version_property(version, component, name, value, False)
            except UcdAbortException as exc:
                raise type(exc)(f"An error occurred while updating the property: {exc}") from exc
            self._notify("Successfully updated version property")

        for name, value in creates.items():
            self._create_and_set(sheet, component, version, PropDef(name=name), value)

    @staticmethod
    def partition(
        existing_names: List[str], properties: Mapping[str, str]
    ) -> Tuple[List[Tuple[str, str]], Dict[str, str]]:
        """Split ``properties`` into (updates in definition order, creates)."""
        matched = [name for name in existing_names if name in properties]
        matched_set = set(matched)
        updates = [(name, properties[name]) for name in dict.fromkeys(matched)]
        creates = {name: value for name, value in properties.items() if name not in matched_set}
        return updates, creates

    def _load_definitions(self, component: str) -> Tuple[PropSheetDef, List[str]]:
        try:
            raw_sheet = self.component_client.get_component_version_prop_sheet_def(component)
            sheet = PropSheetDef(id=str(raw_sheet["id"]), path=str(raw_sheet["path"]))
            raw_defs = self.property_client.get_prop_sheet_def_prop_defs(sheet.path)
        except UcdTransportException as exc:
            raise UcdTransportException(f"An error occurred acquiring property sheets: {exc}") from exc
        except (UcdResponseException, KeyError, TypeError) as exc:
            raise UcdResponseException(
                "An error occurred while processing the JSON object of the version property sheet: "
                f"{self._describe(exc)}"
            ) from exc

        names: List[str] = []
        for raw_def in raw_defs:
            try:
                names.append(str(raw_def["name"]))
            except (KeyError, TypeError) as exc:
                raise UcdResponseException(
                    "An error occurred while processing the JSON object of an existing property "
                    f"definition: {self._describe(exc)}"
                ) from exc
        log.debug("Property sheet %s has definitions %s", sheet.path, names)
        return sheet, names

    def _create_and_set(
        self, sheet: PropSheetDef, component: str, version: str, prop_def: PropDef, value: str
    ) -> None:
        try:
            self._notify(f"Creating property definition for '{prop_def.name}'")
            self.property_client.create_prop_def(
                sheet.id,
                sheet.path,
                prop_def.name,
                prop_def.description,
                prop_def.label,
                prop_def.required,
                prop_def.type,
                prop_def.value,
            )
            self._notify(f"Setting version property '{prop_def.name}' to '{value}'")
            self.version_client.set_version_property(version, component, prop_def.name, value, False)
        except UcdResponseException as exc:
            raise UcdResponseException(
                f"An error occurred while processing the JSON object for the property: {exc}"
            ) from exc
        except UcdAbortException as exc:
            raise type(exc)(f"An error occurred while setting the version property: {exc}") from exc
        self._notify("Successfully set version property")

    @staticmethod
    def _describe(exc: Exception) -> str:
        if isinstance(exc, KeyError):
            return f"missing key {exc}"
        return str(exc)

    def _notify(self, message: str) -> None:
        log.info("%s", message)
        if self.status_callback:
            self.status_callback(message)
