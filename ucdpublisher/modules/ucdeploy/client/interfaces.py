"""Capability interfaces the workflow services are written against."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Protocol, Sequence


class ComponentApi(Protocol):
    def component_exists(self, component: str) -> bool:  # pragma: no cover - interface
        ...

    def create_component(self, name: str, **kwargs: Any) -> str:  # pragma: no cover - interface
        ...

    def add_tag_to_component(self, component: str, tag: str) -> None:  # pragma: no cover - interface
        ...

    def add_component_version_link(
        self, component: str, version: str, link_name: str, link: str
    ) -> None:  # pragma: no cover - interface
        ...

    def get_component_version_prop_sheet_def(self, component: str) -> Dict[str, Any]:  # pragma: no cover
        ...

    def import_component_versions(
        self, component: str, properties: Mapping[str, str]
    ) -> Dict[str, Any]:  # pragma: no cover - interface
        ...


class VersionApi(Protocol):
    def add_version_files(
        self, component: str, version: str, base: Path, files: Sequence[Path], *, charset: str = ...
    ) -> None:  # pragma: no cover - interface
        ...

    def create_and_add_version_files(
        self,
        component: str,
        version: str,
        description: str,
        base: Path,
        files: Sequence[Path],
        *,
        charset: str = ...,
    ) -> str:  # pragma: no cover - interface
        ...

    def set_version_property(
        self, version: str, component: str, name: str, value: str, is_secure: bool = False
    ) -> None:  # pragma: no cover - interface
        ...


class PropertyApi(Protocol):
    def get_prop_sheet_def_prop_defs(self, prop_sheet_def_path: str) -> List[Dict[str, Any]]:  # pragma: no cover
        ...

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
    ) -> Dict[str, Any]:  # pragma: no cover - interface
        ...


class ApplicationApi(Protocol):
    def add_component_to_application(self, application: str, component: str) -> None:  # pragma: no cover
        ...
