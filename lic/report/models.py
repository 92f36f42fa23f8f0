"""Data models for a single scan: the project and its imports."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from lic.exceptions import DuplicateNameError, EmptyNameError
from lic.license.models import UNKNOWN_LICENSE, License

NOT_APPLICABLE = "n/a"
STANDARD_LIBRARY = "Standard Library"


def content_hash(name: str, version: str) -> str:
    """Stable SHA-256 hex digest of ``name@version``."""
    return hashlib.sha256(f"{name}@{version}".encode()).hexdigest()


@dataclass
class Import:
    """One dependency of the scanned project."""

    name: str
    version: str = ""
    branch: str = ""
    revision: str = ""
    is_direct: bool = True
    license: License = UNKNOWN_LICENSE
    url: str = ""
    hash: str = ""


@dataclass
class Project:
    """Aggregate root for one scan.

    ``imports`` only grows through :meth:`insert_import`. ``validated`` and
    ``violations`` hold names from ``imports``; each name lands in exactly one
    of them during classification.
    """

    name: str = ""
    version: str = ""
    hash: str = ""
    imports: dict[str, Import] = field(default_factory=dict)
    validated: dict[str, Import] = field(default_factory=dict)
    violations: dict[str, Import] = field(default_factory=dict)

    def insert_import(
        self,
        name: str,
        version: str = "",
        branch: str = "",
        revision: str = "",
        is_direct: bool = True,
    ) -> Import:
        """Register a new import.

        Raises :class:`EmptyNameError` for an empty name and
        :class:`DuplicateNameError` when *name* is already registered; the
        existing entry is left untouched.
        """
        if not name:
            raise EmptyNameError()
        if name in self.imports:
            raise DuplicateNameError(name)
        imp = Import(
            name=name,
            version=version,
            branch=branch,
            revision=revision,
            is_direct=is_direct,
        )
        self.imports[name] = imp
        return imp

    def mark_validated(self, name: str) -> None:
        self._classify(name, self.validated, self.violations)

    def mark_violation(self, name: str) -> None:
        self._classify(name, self.violations, self.validated)

    def _classify(self, name: str, target: dict[str, Import], other: dict[str, Import]) -> None:
        imp = self.imports.get(name)
        if imp is None:
            raise KeyError(f"unknown import: {name}")
        if name in other:
            raise ValueError(f"import {name} is already classified")
        target[name] = imp

    @property
    def unclassified(self) -> list[str]:
        return [n for n in self.imports if n not in self.validated and n not in self.violations]
