"""Lazy directory walk shared by the tree-scanning collectors."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

# Directories the Go tool itself ignores, plus vendored code.
_SKIP_DIRS = frozenset({"vendor", "testdata", "node_modules"})


def _skip_dir(name: str) -> bool:
    return name in _SKIP_DIRS or name.startswith((".", "_"))


def iter_files(root: Path, match: Callable[[str], bool]) -> Iterator[Path]:
    """Yield files under *root* whose name satisfies *match*.

    Iterative (explicit stack), sorted per directory so the order is stable.
    Unreadable subdirectories are skipped; an unreadable *root* raises
    ``OSError``.
    """
    stack = [root]
    first = True
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError:
            if first:
                raise
            continue
        first = False

        subdirs: list[Path] = []
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if not _skip_dir(entry.name):
                    subdirs.append(Path(entry.path))
            elif entry.is_file() and match(entry.name):
                yield Path(entry.path)
        # reversed so the alphabetically first subdir is visited next
        stack.extend(reversed(subdirs))
