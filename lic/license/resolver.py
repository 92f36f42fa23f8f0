"""LicenseResolver — pick a provider and degrade every failure to the unknown license."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from lic.context import ScanContext
from lic.exceptions import LicenseLookupError, ScanCancelledError
from lic.license.models import License, LicenseTable
from lic.license.provider import LicenseProvider

log = structlog.get_logger("lic.license")


class LicenseResolver:
    """Resolves an import to a :class:`License` from *licenses*.

    Providers are tried in order; the first whose ``supports`` matches is
    the only one asked. Lookup failures never propagate: they are logged
    and the unknown sentinel is returned.
    """

    def __init__(self, providers: Sequence[LicenseProvider], licenses: LicenseTable) -> None:
        self._providers = list(providers)
        self._licenses = licenses

    @property
    def licenses(self) -> LicenseTable:
        return self._licenses

    async def get(
        self,
        ctx: ScanContext,
        name: str,
        version: str = "",
        branch: str = "",
        url: str = "",
    ) -> License:
        unknown = self._licenses.unknown
        if ctx.cancelled:
            log.info("resolver.cancelled", name=name)
            return unknown

        provider = next((p for p in self._providers if p.supports(name)), None)
        if provider is None:
            log.info("resolver.no_provider", name=name)
            return unknown

        try:
            key = await provider.get_license(ctx, name, version, branch, url)
        except ScanCancelledError:
            log.info("resolver.cancelled", name=name, provider=provider.name)
            return unknown
        except LicenseLookupError as exc:
            log.warning(
                "resolver.lookup_failed",
                name=name,
                provider=provider.name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return unknown
        except Exception as exc:
            log.warning(
                "resolver.lookup_failed",
                name=name,
                provider=provider.name,
                error_type=type(exc).__name__,
                error=str(exc),
                exc_info=True,
            )
            return unknown

        lic = self._licenses.lookup(key)
        if lic is None:
            log.warning("resolver.unknown_key", name=name, provider=provider.name, key=key)
            return unknown
        return lic
