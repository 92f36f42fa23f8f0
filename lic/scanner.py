"""Scan pipeline — collect imports, resolve licenses, assemble the report."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import structlog

from lic.collectors import CollectorChain, DependencyCollector, default_collectors
from lic.config import Config
from lic.context import ScanContext
from lic.license.github import GitHubLicenseProvider
from lic.license.resolver import LicenseResolver
from lic.license.spdx import default_license_table
from lic.report.assembler import ComplianceReport, WhitelistValidator, assemble_report
from lic.report.models import Project
from lic.repo import detect_version

log = structlog.get_logger("lic.scanner")


async def scan(
    path: Path,
    *,
    config: Config | None = None,
    ctx: ScanContext | None = None,
    resolver: LicenseResolver | None = None,
    collectors: Sequence[DependencyCollector] | None = None,
    version: str | None = None,
) -> ComplianceReport:
    """Run a full scan of *path* and return the compliance report.

    Without a *resolver*, a GitHub-backed one is built from *config* and
    its HTTP client is closed when the scan ends. Without a *version*, it
    is read from git once.

    Raises :class:`~lic.exceptions.NoDependenciesFoundError` when no
    collector finds anything, and
    :class:`~lic.exceptions.ScanCancelledError` when *ctx* is cancelled
    during collection.
    """
    config = config or Config()
    ctx = ctx or ScanContext()
    project = Project()

    chain = CollectorChain(collectors if collectors is not None else default_collectors())
    collector = chain.collect(ctx, project, path)

    if version is None:
        version = await detect_version(path)

    if resolver is None:
        async with GitHubLicenseProvider(config.github) as github:
            resolver = LicenseResolver([github], default_license_table())
            await WhitelistValidator(config.golang, resolver).validate(ctx, project)
    else:
        await WhitelistValidator(config.golang, resolver).validate(ctx, project)

    report = assemble_report(project, version, collector=collector.name)
    log.info(
        "scanner.finished",
        project=report.project_name,
        collector=collector.name,
        validated=report.validated_count,
        violations=report.violation_count,
    )
    return report
