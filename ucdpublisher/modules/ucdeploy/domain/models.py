"""Dataclasses describing remote objects and run results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import PROP_TYPE_TEXT


@dataclass(frozen=True)
class PropSheetDef:
    id: str
    path: str


@dataclass(frozen=True)
class PropDef:
    name: str
    description: str = ""
    label: str = ""
    required: bool = False
    type: str = PROP_TYPE_TEXT
    value: str = ""


@dataclass
class VersionResult:
    """Outcome of a successful run; fatal problems are raised instead."""

    component_name: str
    version_name: Optional[str] = None
    version_id: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def as_dict(self) -> dict:
        return {
            "componentName": self.component_name,
            "versionName": self.version_name,
            "versionId": self.version_id,
            "warnings": list(self.warnings),
        }
