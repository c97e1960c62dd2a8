"""Local artifact selection and upload into component versions."""

from __future__ import annotations

import codecs
import locale
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Callable, List, Optional, Pattern, Sequence

from ucdpublisher.modules.ucdeploy.client import VersionApi
from ucdpublisher.modules.ucdeploy.domain.constants import DEFAULT_INCLUDE_PATTERN
from ucdpublisher.modules.ucdeploy.util.exceptions import (
    UcdAbortException,
    UcdValidationException,
)

log = logging.getLogger(__name__)


def resolve_charset(name: Optional[str]) -> str:
    """Return the canonical codec name; blank means the platform default."""
    if not name or not name.strip():
        return codecs.lookup(locale.getpreferredencoding(False)).name
    try:
        return codecs.lookup(name.strip()).name
    except LookupError as exc:
        raise UcdValidationException(f"Unsupported charset '{name.strip()}'") from exc


@lru_cache(maxsize=256)
def ant_pattern(pattern: str) -> Pattern[str]:
    """Compile an Ant-style glob: ``**`` spans directories, ``*`` and ``?`` do not."""
    pattern = pattern.replace("\\", "/")
    while pattern.startswith("./"):
        pattern = pattern[2:]
    pattern = pattern.lstrip("/")
    if pattern.endswith("/"):
        pattern += "**"

    regex = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            regex.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == len(pattern):
            regex.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            regex.append(".*")
            i += 2
        elif pattern[i] == "*":
            regex.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            regex.append("[^/]")
            i += 1
        else:
            regex.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(regex) + r"\Z")


class ArtifactPublisher:
    """Validate a base directory, pick the files to send, delegate the transfer."""

    def __init__(self, version_client: VersionApi) -> None:
        self.version_client = version_client
        self.log = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def validate_base_dir(base_dir: str) -> Path:
        base = Path(base_dir).expanduser().absolute()
        if not base.exists():
            raise UcdValidationException(f"Base artifact directory {base} does not exist")
        if not base.is_dir():
            raise UcdValidationException(f"Base artifact directory {base} is not a directory")
        if not any(base.iterdir()):
            raise UcdValidationException(
                f"Base artifact directory {base} does not contain any files to upload. Please place files."
            )
        return base

    @staticmethod
    def collect_files(
        base: Path,
        includes: Sequence[str],
        excludes: Sequence[str] = (),
        extensions: Sequence[str] = (),
    ) -> List[Path]:
        """Return matching regular files below ``base`` as sorted relative paths."""
        include_res = [ant_pattern(p) for p in (includes or [DEFAULT_INCLUDE_PATTERN])]
        exclude_res = [ant_pattern(p) for p in excludes]
        suffixes = tuple("." + ext.lower().lstrip(".") for ext in extensions if ext.strip(". "))

        selected: List[Path] = []
        for path in sorted(base.rglob("*")):
            if not path.is_file():
                continue
            relative = path.relative_to(base)
            rel_text = relative.as_posix()
            if not any(regex.match(rel_text) for regex in include_res):
                continue
            if any(regex.match(rel_text) for regex in exclude_res):
                continue
            if suffixes and not path.name.lower().endswith(suffixes):
                continue
            selected.append(relative)
        return selected

    def publish(
        self,
        component: str,
        version: str,
        description: str,
        base_dir: str,
        includes: Sequence[str],
        excludes: Sequence[str],
        extensions: Sequence[str],
        charset: str,
        on_warning: Optional[Callable[[str], None]] = None,
    ) -> str:
        """Create ``version`` and upload the selected files; returns the version id.

        ``on_warning`` receives non-fatal notes, such as no file matching the
        filters (the version is still created, empty).
        """
        base = self.validate_base_dir(base_dir)
        try:
            files = self.collect_files(base, includes, excludes, extensions)
            if not files:
                message = f"No files under {base} matched the include/exclude patterns, the version will be empty."
                if on_warning:
                    on_warning(message)
                else:
                    self.log.warning("%s", message)
            self.log.info(
                "Publishing %d files from %s as %s:%s (charset=%s)", len(files), base, component, version, charset
            )
            return self.version_client.create_and_add_version_files(
                component, version, description, base, files, charset=charset
            )
        except UcdAbortException as exc:
            raise type(exc)(f"Failed to create component version and uploading files: {exc}") from exc
        except OSError as exc:
            raise UcdAbortException(f"Failed to create component version and uploading files: {exc}") from exc

    def add_files(
        self,
        component: str,
        version: str,
        base_dir: str,
        includes: Sequence[str],
        excludes: Sequence[str],
    ) -> List[Path]:
        """Upload into an already existing version."""
        base = self.validate_base_dir(base_dir)
        try:
            files = self.collect_files(base, includes, excludes)
            self.version_client.add_version_files(component, version, base, files)
        except UcdAbortException as exc:
            raise type(exc)(f"Failed to upload files: {exc}") from exc
        except OSError as exc:
            raise UcdAbortException(f"Failed to upload files: {exc}") from exc
        return files
