"""License lookup: license table, providers and the resolver."""

from lic.license.github import GitHubLicenseProvider
from lic.license.models import UNKNOWN_LICENSE, UNKNOWN_LICENSE_KEY, License, LicenseTable
from lic.license.provider import LicenseProvider
from lic.license.resolver import LicenseResolver
from lic.license.spdx import default_license_table

__all__ = [
    "GitHubLicenseProvider",
    "License",
    "LicenseProvider",
    "LicenseResolver",
    "LicenseTable",
    "UNKNOWN_LICENSE",
    "UNKNOWN_LICENSE_KEY",
    "default_license_table",
]
