"""Parsing helpers shared by the publish workflow."""

from __future__ import annotations

from typing import Dict, List, Optional

from .exceptions import UcdValidationException


def split_files(patterns: Optional[str]) -> List[str]:
    """Split newline separated patterns, dropping blank entries."""
    if not patterns:
        return []
    return [line.strip() for line in patterns.split("\n") if line.strip()]


def map_properties(properties: Optional[str]) -> Dict[str, str]:
    """Parse ``name=value`` lines into a dict; later duplicates win."""
    mapped: Dict[str, str] = {}
    if not properties:
        return mapped
    for raw_line in properties.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if "=" not in line:
            raise UcdValidationException(
                f"Invalid property definition '{line}'. Properties must be specified as name=value."
            )
        name, value = line.split("=", 1)
        name = name.strip()
        if not name:
            raise UcdValidationException(f"Invalid property definition '{line}'. Property name is empty.")
        mapped[name] = value.strip()
    return mapped


def env_key(name: str) -> str:
    return name.replace(" ", "_")
