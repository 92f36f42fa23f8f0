"""Report rendering: human-readable text and JSON."""

from __future__ import annotations

import json

from lic.report.assembler import ComplianceReport


def render_text(report: ComplianceReport) -> str:
    name = report.project_name or "(unnamed project)"
    lines = [
        f"Report for {name} {report.version}",
        f"Generated project hash: {report.hash}",
        "",
    ]

    count = report.validated_count
    if count == 1:
        lines.append("During the scan there was 1 dependency found:")
    else:
        lines.append(f"During the scan there were {count} dependencies found:")
    for imp in report.validated:
        lines.append(
            f"\tImport: {imp.name}, Version: {imp.version}, License: {imp.license.name}"
        )

    count = report.violation_count
    if count == 1:
        lines.append("Additionally 1 blacklisted import was found:")
    else:
        lines.append(f"Additionally {count} blacklisted imports were found:")
    for imp in report.violations:
        lines.append(f"\tImport: {imp.name}, Version: {imp.version}")

    return "\n".join(lines) + "\n"


def render_json(report: ComplianceReport) -> str:
    return json.dumps(report.to_dict(), indent=2)
