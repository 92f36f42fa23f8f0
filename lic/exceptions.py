"""Custom exceptions for lic."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lic.report.assembler import ComplianceReport


class LicError(Exception):
    """Base exception for all lic errors."""


class ScanCancelledError(LicError):
    """Raised when the scan context was cancelled or its deadline passed."""


# ── registry ─────────────────────────────────────────────────────────────


class RegistryError(LicError):
    """Raised when an import cannot be registered on a project."""


class EmptyNameError(RegistryError):
    """Raised when an import is inserted without a name."""

    def __init__(self) -> None:
        super().__init__("import name cannot be empty")


class DuplicateNameError(RegistryError):
    """Raised when an import with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"import already exists: {name}")


# ── collection ───────────────────────────────────────────────────────────


class CollectorError(LicError):
    """Raised by a collector; the chain falls back to the next collector."""


class ManifestReadError(CollectorError):
    """Raised when a manifest or source tree cannot be read."""


class ManifestParseError(CollectorError):
    """Raised when a manifest exists but is not well-formed."""


class NoDependenciesFoundError(LicError):
    """Raised when no collector produced a single dependency."""

    def __init__(self, path: str, last_error: Exception | None = None) -> None:
        self.path = path
        self.last_error = last_error
        msg = f"no dependencies found in {path}"
        if last_error is not None:
            msg += f" (last error: {last_error})"
        super().__init__(msg)


# ── license resolution ───────────────────────────────────────────────────


class LicenseLookupError(LicError):
    """Base for provider failures. The resolver degrades all of them to unknown."""


class UnparsableRepositoryError(LicenseLookupError):
    """Raised when an import path has no owner/repo shape."""

    def __init__(self, import_path: str) -> None:
        self.import_path = import_path
        super().__init__(f"cannot figure out repository for {import_path!r}")


class RateLimitExceededError(LicenseLookupError):
    """Raised when the API rate limit is exhausted and the reset is too far away."""

    def __init__(self, reset_at: datetime | None) -> None:
        self.reset_at = reset_at
        when = reset_at.isoformat() if reset_at else "unknown"
        super().__init__(f"API rate limit exceeded (resets at {when})")


class NoLicenseFoundError(LicenseLookupError):
    """Raised when the repository exists but carries no license metadata."""

    def __init__(self, owner: str, repo: str) -> None:
        self.owner = owner
        self.repo = repo
        super().__init__(f"no license found for {owner}/{repo}")


class RepositoryRequestError(LicenseLookupError):
    """Raised on a non-retryable API response (4xx, malformed body)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TransientAPIError(LicenseLookupError):
    """Raised when transient failures persisted through every retry."""

    def __init__(self, message: str, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(message)


# ── policy ───────────────────────────────────────────────────────────────


class ComplianceViolationError(LicError):
    """Raised by :meth:`ComplianceReport.raise_for_violations` when the report has violations."""

    def __init__(self, report: ComplianceReport) -> None:
        self.report = report
        super().__init__(f"{report.violation_count} import(s) violate the whitelist")
