"""LicenseProvider protocol — maps an import path to a license key."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lic.context import ScanContext


@runtime_checkable
class LicenseProvider(Protocol):
    """Interface that every license provider must satisfy."""

    name: str

    def supports(self, import_path: str) -> bool: ...

    async def get_license(
        self,
        ctx: ScanContext,
        import_path: str,
        version: str = "",
        branch: str = "",
        url: str = "",
    ) -> str:
        """Return the SPDX key for *import_path* or raise a ``LicenseLookupError``."""
        ...
