"""Git helper — detect the scanned project's version."""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from lic.report.models import NOT_APPLICABLE

log = structlog.get_logger("lic.repo")


async def detect_version(path: Path) -> str:
    """Return ``git describe --tags --always --dirty`` for *path*.

    Falls back to ``n/a`` outside a git checkout or without git installed.
    """
    cmd = ["git", "-C", str(path), "describe", "--tags", "--always", "--dirty"]
    try:
        out = await _run(cmd)
    except (OSError, RuntimeError) as exc:
        log.debug("repo.version_unavailable", path=str(path), error=str(exc))
        return NOT_APPLICABLE
    return out or NOT_APPLICABLE


async def _run(cmd: list[str]) -> str:
    """Run a git command and return its stripped stdout, raising RuntimeError on failure."""
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise RuntimeError(
            f"git command failed (exit {proc.returncode}): {stderr.decode().strip()}"
        )
    return stdout.decode().strip()
