from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Tuple

import pytest

from ucdpublisher.modules.ucdeploy.util.exceptions import UcdResponseException, UcdTransportException


class FakeUcd:
    """In-memory stand-in for the component, version, property and application clients."""

    def __init__(self, components=("svc-a", "svc-b"), prop_defs=()):
        self.components = set(components)
        self.sheet = {"id": "11111111-2222-3333-4444-555555555555", "path": "components/svc/versionPropSheetDef"}
        self.prop_defs: List[Dict[str, Any]] = [{"name": name} for name in prop_defs]
        self.version_values: Dict[Tuple[str, str], Dict[str, str]] = {}
        self.calls: List[Tuple[str, tuple]] = []
        self.fail: Dict[str, Exception] = {}

    def _record(self, op: str, *args: Any) -> None:
        self.calls.append((op, args))
        if op in self.fail:
            raise self.fail[op]

    def ops(self) -> List[str]:
        return [op for op, _ in self.calls]

    def count(self, op: str) -> int:
        return self.ops().count(op)

    # components
    def component_exists(self, component: str) -> bool:
        self._record("component_exists", component)
        return component in self.components

    def create_component(self, name: str, **kwargs: Any) -> str:
        self._record("create_component", name, kwargs)
        self.components.add(name)
        return f"id-{name}"

    def add_tag_to_component(self, component: str, tag: str) -> None:
        self._record("add_tag_to_component", component, tag)

    def add_component_version_link(self, component: str, version: str, link_name: str, link: str) -> None:
        self._record("add_component_version_link", component, version, link_name, link)

    def get_component_version_prop_sheet_def(self, component: str) -> Dict[str, Any]:
        self._record("get_component_version_prop_sheet_def", component)
        return dict(self.sheet)

    def import_component_versions(self, component: str, properties: Mapping[str, str]) -> Dict[str, Any]:
        self._record("import_component_versions", component, dict(properties))
        return {"requestId": "r-1"}

    # applications
    def add_component_to_application(self, application: str, component: str) -> None:
        self._record("add_component_to_application", application, component)

    # properties
    def get_prop_sheet_def_prop_defs(self, prop_sheet_def_path: str) -> List[Dict[str, Any]]:
        self._record("get_prop_sheet_def_prop_defs", prop_sheet_def_path)
        return [dict(d) for d in self.prop_defs]

    def create_prop_def(self, sheet_id, sheet_path, name, description, label, required, prop_type, value):
        self._record("create_prop_def", sheet_id, sheet_path, name, description, label, required, prop_type, value)
        self.prop_defs.append({"name": name, "type": prop_type})
        return {"name": name}

    # versions
    def create_and_add_version_files(
        self, component: str, version: str, description: str, base: Path, files: Sequence[Path], *, charset: str = "utf-8"
    ) -> str:
        self._record("create_and_add_version_files", component, version, description, base, list(files), charset)
        return "9f0c6a52-0d6e-4f59-9c1b-3d1d7f1f0a11"

    def add_version_files(self, component, version, base, files, *, charset="utf-8"):
        self._record("add_version_files", component, version, base, list(files), charset)

    def set_version_property(self, version: str, component: str, name: str, value: str, is_secure: bool = False):
        self._record("set_version_property", version, component, name, value)
        self.version_values.setdefault((component, version), {})[name] = value

    def get_version_property(self, component: str, version: str, name: str) -> str:
        return self.version_values[(component, version)][name]


@pytest.fixture
def fake_ucd() -> FakeUcd:
    return FakeUcd()


@pytest.fixture
def artifact_dir(tmp_path: Path) -> Path:
    base = tmp_path / "art"
    base.mkdir()
    (base / "app.war").write_text("war")
    (base / "README.txt").write_text("readme")
    (base / "conf").mkdir()
    (base / "conf" / "app.properties").write_text("k=v")
    return base


@pytest.fixture
def transport_error() -> UcdTransportException:
    return UcdTransportException("GET /cli/component/info failed: connection refused")


@pytest.fixture
def response_error() -> UcdResponseException:
    return UcdResponseException("Invalid JSON from GET /property: '<html>'")
