"""Import registry, whitelist classification and report output."""

from lic.report.assembler import ComplianceReport, WhitelistValidator, assemble_report
from lic.report.models import Import, Project, content_hash

__all__ = [
    "ComplianceReport",
    "Import",
    "Project",
    "WhitelistValidator",
    "assemble_report",
    "content_hash",
]
