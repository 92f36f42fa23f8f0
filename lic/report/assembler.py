"""Whitelist classification and compliance report assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from lic.config import GolangConfig
from lic.context import ScanContext
from lic.exceptions import ComplianceViolationError
from lic.license.resolver import LicenseResolver
from lic.report.models import STANDARD_LIBRARY, Import, Project, content_hash

log = structlog.get_logger("lic.report")

# Import paths that map to browsable repo URLs
_HOST_PREFIXES = ("github.com/", "gitlab.com/", "bitbucket.org/")


def canonical_url(import_path: str) -> str:
    """Browsable URL for an import path.

    Well-known hosts are trimmed to ``host/owner/repo``; anything else
    keeps its full path.
    """
    for prefix in _HOST_PREFIXES:
        if import_path.startswith(prefix):
            parts = import_path.split("/")
            if len(parts) >= 3:
                return "https://" + "/".join(parts[:3])
    return "https://" + import_path


class WhitelistValidator:
    """Sorts every import of a project into validated or violations.

    Standard-library packages are validated without a lookup. Whitelisted
    imports get their license resolved and are validated. Everything else
    is a violation, and no network call is made for it.
    """

    def __init__(self, config: GolangConfig, resolver: LicenseResolver) -> None:
        self._config = config
        self._resolver = resolver

    async def validate(self, ctx: ScanContext, project: Project) -> None:
        for name in sorted(project.imports):
            imp = project.imports[name]
            await self._classify(ctx, project, imp)
            imp.hash = content_hash(imp.name, imp.version)

    async def _classify(self, ctx: ScanContext, project: Project, imp: Import) -> None:
        if self._config.is_stdlib(imp.name):
            imp.version = STANDARD_LIBRARY
            project.mark_validated(imp.name)
            return

        if not self._config.is_whitelisted(imp.name):
            log.info("report.violation", name=imp.name, version=imp.version)
            project.mark_violation(imp.name)
            return

        imp.url = canonical_url(imp.name)
        imp.license = await self._resolver.get(ctx, imp.name, imp.version, imp.branch, imp.url)
        project.mark_validated(imp.name)


@dataclass
class ComplianceReport:
    """Final result of a scan. ``succeeded`` depends only on the violations."""

    project_name: str
    version: str
    hash: str
    validated: list[Import] = field(default_factory=list)
    violations: list[Import] = field(default_factory=list)
    collector: str = ""

    @property
    def validated_count(self) -> int:
        return len(self.validated)

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    @property
    def succeeded(self) -> bool:
        return not self.violations

    def raise_for_violations(self) -> None:
        """Raise :class:`ComplianceViolationError` if any import violates the whitelist."""
        if self.violations:
            raise ComplianceViolationError(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": self.project_name,
            "version": self.version,
            "hash": self.hash,
            "collector": self.collector,
            "succeeded": self.succeeded,
            "validated_count": self.validated_count,
            "violation_count": self.violation_count,
            "validated": [
                {
                    "name": imp.name,
                    "version": imp.version,
                    "direct": imp.is_direct,
                    "license": imp.license.short_name,
                    "license_name": imp.license.name,
                    "url": imp.url,
                    "hash": imp.hash,
                }
                for imp in self.validated
            ],
            "violations": [
                {
                    "name": imp.name,
                    "version": imp.version,
                    "direct": imp.is_direct,
                    "hash": imp.hash,
                }
                for imp in self.violations
            ],
        }


def assemble_report(project: Project, version: str, *, collector: str = "") -> ComplianceReport:
    """Stamp *project* with its version and hash and build the report.

    Every import must already be classified.
    """
    unclassified = project.unclassified
    if unclassified:
        raise ValueError(f"{len(unclassified)} import(s) were never classified: {unclassified}")

    project.version = version
    project.hash = content_hash(project.name, version)
    return ComplianceReport(
        project_name=project.name,
        version=project.version,
        hash=project.hash,
        validated=sorted(project.validated.values(), key=lambda i: i.name),
        violations=sorted(project.violations.values(), key=lambda i: i.name),
        collector=collector,
    )
