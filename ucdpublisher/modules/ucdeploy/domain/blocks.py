"""Version creation request objects built from build-step configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


def _first(payload: Dict[str, Any], *keys: str, default: Optional[str] = None) -> Optional[str]:
    for key in keys:
        if key in payload and payload[key] is not None:
            return str(payload[key])
    return default


class DeliveryType(str, Enum):
    PUSH = "Push"
    PULL = "Pull"


@dataclass
class DeliveryBlock:
    """Base delivery payload; ``delivery_type`` is kept as received."""

    delivery_type: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DeliveryBlock":
        raw_type = _first(payload, "delivery_type", "deliveryType", "type", default="") or ""
        normalized = raw_type.strip().lower()
        if normalized == DeliveryType.PUSH.value.lower():
            return Push.from_dict(payload)
        if normalized == DeliveryType.PULL.value.lower():
            return Pull.from_dict(payload)
        return cls(delivery_type=raw_type)


@dataclass
class Push(DeliveryBlock):
    push_version: str = ""
    base_dir: str = ""
    file_include_patterns: str = ""
    file_exclude_patterns: str = ""
    extensions: str = ""
    charset: str = ""
    push_properties: str = ""
    push_description: str = ""
    delivery_type: str = field(default=DeliveryType.PUSH.value)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Push":
        return cls(
            push_version=_first(payload, "push_version", "pushVersion", default="") or "",
            base_dir=_first(payload, "base_dir", "baseDir", default="") or "",
            file_include_patterns=_first(
                payload, "file_include_patterns", "fileIncludePatterns", default=""
            ) or "",
            file_exclude_patterns=_first(
                payload, "file_exclude_patterns", "fileExcludePatterns", default=""
            ) or "",
            extensions=_first(payload, "extensions", default="") or "",
            charset=_first(payload, "charset", default="") or "",
            push_properties=_first(payload, "push_properties", "pushProperties", default="") or "",
            push_description=_first(payload, "push_description", "pushDescription", default="") or "",
        )


@dataclass
class Pull(DeliveryBlock):
    pull_properties: str = ""
    delivery_type: str = field(default=DeliveryType.PULL.value)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Pull":
        return cls(pull_properties=_first(payload, "pull_properties", "pullProperties", default="") or "")


@dataclass
class CreateComponentBlock:
    component_template: str = ""
    component_application: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "CreateComponentBlock":
        return cls(
            component_template=_first(payload, "component_template", "componentTemplate", default="") or "",
            component_application=_first(
                payload, "component_application", "componentApplication", default=""
            ) or "",
        )


@dataclass
class VersionBlock:
    component_name: str
    delivery: DeliveryBlock
    component_tag: Optional[str] = None
    create_component: Optional[CreateComponentBlock] = None

    @property
    def create_component_checked(self) -> bool:
        return self.create_component is not None

    @property
    def tag(self) -> str:
        return self.component_tag or ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "VersionBlock":
        delivery = payload.get("delivery")
        if not isinstance(delivery, dict):
            raise ValueError("delivery must be an object")
        create = payload.get("create_component", payload.get("createComponent"))
        return cls(
            component_name=_first(payload, "component_name", "componentName", default="") or "",
            component_tag=_first(payload, "component_tag", "componentTag"),
            create_component=CreateComponentBlock.from_dict(create) if isinstance(create, dict) else None,
            delivery=DeliveryBlock.from_dict(delivery),
        )
