"""Shared pytest fixtures for lic tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from lic.context import ScanContext
from lic.report.models import Project


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def ctx() -> ScanContext:
    return ScanContext()


@pytest.fixture
def cancelled_ctx() -> ScanContext:
    c = ScanContext()
    c.cancel()
    return c


@pytest.fixture
def project() -> Project:
    return Project()


@pytest.fixture
def go_project(tmp_path: Path):
    """Factory that lays out a Go project from a ``{relative_path: content}`` dict."""

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
