"""License value object and the immutable table of known licenses."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

UNKNOWN_LICENSE_KEY = "na"


@dataclass(frozen=True)
class License:
    """A license identified by its SPDX-style short name, e.g. ``apache-2.0``."""

    short_name: str
    name: str
    alt_name: str = ""
    link: str = ""
    text: str = ""

    @property
    def is_unknown(self) -> bool:
        return self.short_name == UNKNOWN_LICENSE_KEY


UNKNOWN_LICENSE = License(
    short_name=UNKNOWN_LICENSE_KEY,
    name="Not Available",
    alt_name="N/A",
    text="Placeholder for unknown license",
)


class LicenseTable(Mapping[str, License]):
    """Read-only mapping of SPDX key -> :class:`License`.

    Always contains the unknown sentinel under ``"na"``. Built once at
    startup and handed to the resolver explicitly.
    """

    def __init__(self, licenses: Mapping[str, License] | None = None) -> None:
        data = {UNKNOWN_LICENSE_KEY: UNKNOWN_LICENSE}
        for key, lic in (licenses or {}).items():
            data[key.lower()] = lic
        self._data = MappingProxyType(data)

    def __getitem__(self, key: str) -> License:
        return self._data[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def unknown(self) -> License:
        return self._data[UNKNOWN_LICENSE_KEY]

    def lookup(self, key: str | None) -> License | None:
        """Return the license for *key*, or None when the key is not known."""
        if not key:
            return None
        return self._data.get(key.lower())
