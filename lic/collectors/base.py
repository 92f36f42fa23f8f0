"""Collector protocol — one strategy for extracting dependencies from a project."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from lic.context import ScanContext
from lic.exceptions import RegistryError
from lic.report.models import Project

log = structlog.get_logger("lic.collector")


@dataclass(frozen=True)
class Requirement:
    """A dependency as read from a manifest, before registration."""

    name: str
    version: str = ""
    branch: str = ""
    revision: str = ""
    is_direct: bool = True


@runtime_checkable
class DependencyCollector(Protocol):
    """Interface that every dependency collector must satisfy.

    Collectors are stateless. ``can_handle`` is a cheap existence check,
    ``collect`` registers imports on *project* or raises a
    :class:`~lic.exceptions.CollectorError`.
    """

    name: str

    def can_handle(self, path: Path) -> bool: ...

    def collect(self, ctx: ScanContext, project: Project, path: Path) -> None: ...


def register_requirements(
    project: Project, requirements: Iterable[Requirement], *, collector: str
) -> int:
    """Insert every requirement into *project*; returns how many were new.

    Parsing is finished before this is called, so a read or parse failure
    never leaves a half-registered project behind. Duplicates and empty
    names are logged and skipped.
    """
    added = 0
    for req in requirements:
        try:
            project.insert_import(req.name, req.version, req.branch, req.revision, req.is_direct)
        except RegistryError as exc:
            log.debug("collector.import_skipped", collector=collector, name=req.name, reason=str(exc))
            continue
        added += 1
    return added
