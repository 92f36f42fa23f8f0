"""Collector for dep's Gopkg.lock files."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import structlog

from lic.collectors.base import Requirement, register_requirements
from lic.collectors.walk import iter_files
from lic.context import ScanContext
from lic.exceptions import ManifestParseError, ManifestReadError
from lic.report.models import Project

log = structlog.get_logger("lic.collector")

GOPKG_LOCK = "Gopkg.lock"


def _str_field(entry: dict, key: str) -> str:
    value = entry.get(key, "")
    return value if isinstance(value, str) else ""


def parse_gopkg_lock(content: str) -> list[Requirement]:
    """Extract ``[[projects]]`` entries from a Gopkg.lock document.

    The lock format does not record transitivity reliably, so every entry
    is registered as a direct dependency.

    Raises :class:`ManifestParseError` for invalid TOML or a ``projects``
    key that is not an array of tables.
    """
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestParseError(f"invalid {GOPKG_LOCK}: {exc}") from exc

    projects = data.get("projects", [])
    if not isinstance(projects, list):
        raise ManifestParseError(f"invalid {GOPKG_LOCK}: 'projects' is not an array of tables")

    requirements: list[Requirement] = []
    for entry in projects:
        if not isinstance(entry, dict):
            continue
        requirements.append(
            Requirement(
                name=_str_field(entry, "name"),
                version=_str_field(entry, "version"),
                branch=_str_field(entry, "branch"),
                revision=_str_field(entry, "revision"),
                is_direct=True,
            )
        )
    return requirements


class GodepCollector:
    """Reads every Gopkg.lock below the project root (vendored copies excluded)."""

    name = "Gopkg.lock"

    def can_handle(self, path: Path) -> bool:
        return (path / GOPKG_LOCK).is_file()

    def collect(self, ctx: ScanContext, project: Project, path: Path) -> None:
        ctx.raise_if_cancelled()
        try:
            lock_files = list(iter_files(path, lambda name: name == GOPKG_LOCK))
        except OSError as exc:
            raise ManifestReadError(f"cannot walk {path}: {exc}") from exc
        if not lock_files:
            raise ManifestReadError(f"{GOPKG_LOCK} does not exist in {path}")

        requirements: list[Requirement] = []
        for lock_file in lock_files:
            try:
                content = lock_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise ManifestReadError(f"cannot read {lock_file}: {exc}") from exc
            requirements.extend(parse_gopkg_lock(content))

        added = register_requirements(project, requirements, collector=self.name)
        log.info("collector.parsed", collector=self.name, files=len(lock_files), imports=added)
