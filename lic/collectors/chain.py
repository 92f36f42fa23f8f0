"""CollectorChain — try collectors in priority order until one yields imports."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import structlog

from lic.collectors.base import DependencyCollector
from lic.context import ScanContext
from lic.exceptions import CollectorError, NoDependenciesFoundError
from lic.report.models import Project

log = structlog.get_logger("lic.collector")


class CollectorChain:
    """Ordered fallback over :class:`DependencyCollector` strategies.

    The first collector that registers at least one import wins; later
    collectors never run, so imports are never counted twice.
    """

    def __init__(self, collectors: Sequence[DependencyCollector]) -> None:
        self._collectors = list(collectors)

    @property
    def collectors(self) -> list[DependencyCollector]:
        return list(self._collectors)

    def collect(self, ctx: ScanContext, project: Project, path: Path) -> DependencyCollector:
        """Populate *project* from *path*; returns the collector that succeeded.

        Raises :class:`~lic.exceptions.ScanCancelledError` if *ctx* is
        cancelled between collectors, and :class:`NoDependenciesFoundError`
        (chained to the last collector error) when none produced imports.
        """
        last_error: CollectorError | None = None

        for collector in self._collectors:
            ctx.raise_if_cancelled()
            if not collector.can_handle(path):
                log.debug("collector.skipped", collector=collector.name, path=str(path))
                continue

            before = len(project.imports)
            try:
                collector.collect(ctx, project, path)
            except CollectorError as exc:
                log.warning("collector.failed", collector=collector.name, error=str(exc))
                last_error = exc
                continue

            found = len(project.imports) - before
            if found > 0:
                log.info("collector.selected", collector=collector.name, imports=found)
                return collector
            log.info("collector.empty", collector=collector.name, path=str(path))

        raise NoDependenciesFoundError(str(path), last_error) from last_error
