"""Collector that scans Go source files for import declarations.

Fallback when no manifest is present: versions cannot be recovered, so
every import is registered as ``n/a``. Files are parsed with the
tree-sitter Go grammar; only the package clause and the import
declarations that follow it are inspected.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import structlog
import tree_sitter_go as tsgo
from tree_sitter import Language, Node, Parser

from lic.collectors.base import Requirement, register_requirements
from lic.collectors.walk import iter_files
from lic.config import matches_domain
from lic.context import ScanContext
from lic.exceptions import ManifestReadError
from lic.report.models import NOT_APPLICABLE, Project

log = structlog.get_logger("lic.collector")

_GO_LANGUAGE = Language(tsgo.language())

# cgo pseudo-package, not a dependency
_CGO_IMPORT = "C"


class GoSyntaxError(ValueError):
    """The file's package clause or import declarations are malformed."""


def _header(root: Node) -> Iterator[Node]:
    """Yield the top-level nodes up to the first declaration after the imports."""
    for child in root.children:
        if child.type in ("comment", ";", "\n"):
            continue
        if child.type == "ERROR" and any(c.type == "import" for c in child.children):
            yield child
        elif child.type in ("package_clause", "import_declaration"):
            yield child
        else:
            return


def _import_specs(decl: Node) -> Iterator[Node]:
    for child in decl.children:
        if child.type == "import_spec":
            yield child
        elif child.type == "import_spec_list":
            yield from (c for c in child.children if c.type == "import_spec")


def _import_path(spec: Node) -> str:
    path_node = spec.child_by_field_name("path")
    if path_node is None or path_node.is_missing:
        raise GoSyntaxError(f"missing import path at line {spec.start_point[0] + 1}")
    # interpreted or raw string literal: drop the quotes or backticks
    path = path_node.text.decode()[1:-1]
    if not path:
        raise GoSyntaxError(f"empty import path at line {spec.start_point[0] + 1}")
    return path


def extract_go_imports(source: str) -> list[str]:
    """Return the import paths declared in one Go source file.

    Raises ``GoSyntaxError`` when the file does not start with a package
    clause or when its import declarations do not parse. Syntax errors
    further down the file are ignored.
    """
    parser = Parser(_GO_LANGUAGE)
    tree = parser.parse(source.lstrip("\ufeff").encode())

    header = list(_header(tree.root_node))
    if not header or header[0].type != "package_clause" or header[0].has_error:
        raise GoSyntaxError("missing package clause")

    imports: list[str] = []
    for node in header[1:]:
        if node.type == "ERROR" or node.has_error:
            raise GoSyntaxError(f"malformed import declaration at line {node.start_point[0] + 1}")
        imports.extend(_import_path(spec) for spec in _import_specs(node))
    return imports


def scan_source_tree(root: Path) -> set[str]:
    """Collect the distinct import paths of every ``.go`` file under *root*.

    Unreadable or malformed files are logged and skipped. Raises
    ``OSError`` when *root* itself cannot be listed.
    """
    found: set[str] = set()
    files = 0
    for file_path in iter_files(root, lambda name: name.endswith(".go")):
        files += 1
        try:
            source = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("gopath.unreadable", file=str(file_path), error=str(exc))
            continue
        try:
            file_imports = extract_go_imports(source)
        except GoSyntaxError as exc:
            log.warning("gopath.parse_failed", file=str(file_path), error=str(exc))
            continue
        found.update(file_imports)
    log.debug("gopath.scanned", root=str(root), files=files, imports=len(found))
    return found


class GopathCollector:
    """Last-resort collector: any existing directory qualifies."""

    name = "GOPATH"

    def can_handle(self, path: Path) -> bool:
        return path.is_dir()

    def collect(self, ctx: ScanContext, project: Project, path: Path) -> None:
        ctx.raise_if_cancelled()
        if not path.is_dir():
            raise ManifestReadError(f"project folder {path} does not exist")
        try:
            found = scan_source_tree(path)
        except OSError as exc:
            raise ManifestReadError(f"cannot walk {path}: {exc}") from exc

        found.discard(_CGO_IMPORT)
        if project.name:
            # the project's own packages are not dependencies
            found = {p for p in found if not matches_domain(p, project.name)}

        requirements = [Requirement(name=p, version=NOT_APPLICABLE) for p in sorted(found)]
        added = register_requirements(project, requirements, collector=self.name)
        log.info("collector.parsed", collector=self.name, root=str(path), imports=added)
