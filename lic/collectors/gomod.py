"""Collector for Go go.mod files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from lic.collectors.base import Requirement, register_requirements
from lic.context import ScanContext
from lic.exceptions import ManifestReadError
from lic.report.models import Project

log = structlog.get_logger("lic.collector")

GO_MOD = "go.mod"

# module github.com/foo/bar
_MODULE_RE = re.compile(r'^module\s+"?([^\s"]+?)"?\s*(?://.*)?$')

# require github.com/foo/bar v1.2.3 // indirect
# require (github.com/foo/bar v1.2.3)
_INLINE_REQUIRE_RE = re.compile(r"^require\s+\(?\s*(\S+)\s+([^\s()/]+)\s*\)?\s*(?://(.*))?$")

# require (   replace (   exclude (
_BLOCK_START_RE = re.compile(r"^([a-z]+)\s*\(\s*(?://.*)?$")

# Inside a block: github.com/foo/bar v1.2.3 // indirect
# Versions never contain "/", so "v1.2.3//indirect" splits at the comment.
_BLOCK_LINE_RE = re.compile(r"^(\S+)\s+([^\s/]+)\s*(?://(.*))?$")

_DIRECTIVE_RE = re.compile(
    r"^(module|go|toolchain|godebug|require|replace|exclude|retract|tool|ignore)(?:\s|\(|$)"
)


@dataclass
class GoModFile:
    module: str = ""
    requires: list[Requirement] = field(default_factory=list)


def _is_direct(comment: str | None) -> bool:
    """Only an exact ``// indirect`` marker makes a dependency transitive.

    Anything else after ``//`` is ambiguous and counts as direct.
    """
    if comment is None:
        return True
    text = comment.strip().rstrip(")").strip()
    return not (text == "indirect" or text.startswith("indirect;"))


def _requirement(module: str, version: str, comment: str | None) -> Requirement:
    return Requirement(name=module.strip('"'), version=version, is_direct=_is_direct(comment))


def parse_go_mod(content: str) -> GoModFile:
    """Parse go.mod text into the module path and its requirements.

    Only ``require`` entries become requirements; ``replace``, ``exclude``
    and ``retract`` blocks are skipped. A block ends at the first unindented
    ``)``. A directive (or another block opener) seen inside an open block
    ends that block and is then handled as a top-level line.
    """
    result = GoModFile()
    block: str | None = None

    for lineno, raw_line in enumerate(content.splitlines(), start=1):
        line = raw_line.strip()

        if block is not None:
            if raw_line.rstrip() == ")":
                block = None
                continue
            if not line or line.startswith("//"):
                continue
            unindented = not raw_line[:1].isspace()
            if _BLOCK_START_RE.match(line) or (unindented and _DIRECTIVE_RE.match(line)):
                log.debug("gomod.block_terminated", line=lineno, block=block)
                block = None
            else:
                if block == "require":
                    m = _BLOCK_LINE_RE.match(line)
                    if m:
                        result.requires.append(_requirement(m.group(1), m.group(2), m.group(3)))
                continue

        if not line or line.startswith("//"):
            continue

        m = _BLOCK_START_RE.match(line)
        if m:
            block = m.group(1)
            continue

        m = _MODULE_RE.match(line)
        if m:
            result.module = m.group(1)
            continue

        m = _INLINE_REQUIRE_RE.match(line)
        if m:
            result.requires.append(_requirement(m.group(1), m.group(2), m.group(3)))

    if block is not None:
        log.debug("gomod.block_unclosed", block=block)
    return result


class GoModCollector:
    name = "go.mod"

    def can_handle(self, path: Path) -> bool:
        return (path / GO_MOD).is_file()

    def collect(self, ctx: ScanContext, project: Project, path: Path) -> None:
        ctx.raise_if_cancelled()
        file_path = path / GO_MOD
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestReadError(f"cannot read {file_path}: {exc}") from exc

        parsed = parse_go_mod(content)
        if parsed.module:
            project.name = parsed.module
        added = register_requirements(project, parsed.requires, collector=self.name)
        log.info("collector.parsed", collector=self.name, file=str(file_path), imports=added)
