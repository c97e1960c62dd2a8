"""Version resource operations, including the multipart file upload."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Sequence

from .base import UcdRestClient


class VersionClient(UcdRestClient):
    def create_version(self, component: str, name: str, description: str = "") -> str:
        resp = self._request(
            "POST",
            "/cli/version/createVersion",
            params={"component": component, "name": name, "description": description},
        )
        return str(self._require(self._json(resp), "id", "Create version"))

    def add_version_files(
        self,
        component: str,
        version: str,
        base: Path,
        files: Sequence[Path],
        *,
        charset: str = "utf-8",
    ) -> None:
        """Upload ``files`` (relative to ``base``) into an existing version."""
        with ExitStack() as stack:
            parts = []
            for relative in files:
                handle = stack.enter_context(open(base / relative, "rb"))
                parts.append(("file", (relative.as_posix(), handle, "application/octet-stream")))
            self.log.info("Uploading %d files from %s to %s:%s", len(parts), base, component, version)
            self._request(
                "POST",
                "/cli/version/addFiles",
                data={"component": component, "version": version, "charset": charset},
                files=parts,
            )

    def create_and_add_version_files(
        self,
        component: str,
        version: str,
        description: str,
        base: Path,
        files: Sequence[Path],
        *,
        charset: str = "utf-8",
    ) -> str:
        version_id = self.create_version(component, version, description)
        self.add_version_files(component, version, base, files, charset=charset)
        return version_id

    def set_version_property(
        self,
        version: str,
        component: str,
        name: str,
        value: str,
        is_secure: bool = False,
    ) -> None:
        self._request(
            "PUT",
            "/cli/version/versionProperty",
            params={
                "version": version,
                "component": component,
                "name": name,
                "value": value,
                "isSecure": self._flag(is_secure),
            },
        )
