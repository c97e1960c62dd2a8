"""Placeholder expansion for build variables."""

from __future__ import annotations

import re
from typing import Mapping, Optional

_PLACEHOLDER = re.compile(r"\$(?:\{([A-Za-z_][A-Za-z0-9_.]*)\}|([A-Za-z_][A-Za-z0-9_]*))")


class EnvVars(dict):
    """Build variables with ``$NAME`` / ``${NAME}`` expansion.

    Unknown placeholders are left untouched so a literal ``$`` in a path or
    password does not disappear. ``$$`` is an escaped dollar sign.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        super().__init__(values or {})

    def expand(self, value: Optional[str]) -> str:
        if value is None:
            return ""
        parts = value.split("$$")
        return "$".join(_PLACEHOLDER.sub(self._replace, part) for part in parts)

    def _replace(self, match: "re.Match[str]") -> str:
        name = match.group(1) or match.group(2)
        if name in self:
            return str(self[name])
        return match.group(0)
