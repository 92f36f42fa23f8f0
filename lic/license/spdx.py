"""Default license table, keyed by the SPDX identifiers the GitHub API returns."""

from __future__ import annotations

from lic.license.models import License, LicenseTable

_SPDX_NAMES: dict[str, str] = {
    # permissive, MIT/BSD style
    "0bsd": "BSD Zero Clause License",
    "mit": "MIT License",
    "mit-0": "MIT No Attribution",
    "bsd-1-clause": "BSD 1-Clause License",
    "bsd-2-clause": 'BSD 2-Clause "Simplified" License',
    "bsd-2-clause-patent": "BSD 2-Clause Plus Patent License",
    "bsd-3-clause": 'BSD 3-Clause "New" or "Revised" License',
    "bsd-3-clause-clear": "BSD 3-Clause Clear License",
    "bsd-4-clause": 'BSD 4-Clause "Original" or "Old" License',
    "isc": "ISC License",
    "ncsa": "University of Illinois/NCSA Open Source License",
    # permissive, Apache style
    "apache-1.0": "Apache License 1.0",
    "apache-1.1": "Apache License 1.1",
    "apache-2.0": "Apache License 2.0",
    # academic
    "afl-1.1": "Academic Free License v1.1",
    "afl-1.2": "Academic Free License v1.2",
    "afl-2.0": "Academic Free License v2.0",
    "afl-2.1": "Academic Free License v2.1",
    "afl-3.0": "Academic Free License v3.0",
    "ecl-1.0": "Educational Community License v1.0",
    "ecl-2.0": "Educational Community License v2.0",
    # other permissive
    "bsl-1.0": "Boost Software License 1.0",
    "unlicense": "The Unlicense",
    "zlib": "zLib License",
    "postgresql": "PostgreSQL License",
    "wtfpl": "Do What The F*ck You Want To Public License",
    "artistic-1.0": "Artistic License 1.0",
    "artistic-2.0": "Artistic License 2.0",
    "python-2.0": "Python License 2.0",
    # strong copyleft
    "gpl": "GNU General Public License Family",
    "gpl-1.0": "GNU General Public License v1.0",
    "gpl-1.0-only": "GNU General Public License v1.0 only",
    "gpl-1.0-or-later": "GNU General Public License v1.0 or later",
    "gpl-2.0": "GNU General Public License v2.0",
    "gpl-2.0-only": "GNU General Public License v2.0 only",
    "gpl-2.0-or-later": "GNU General Public License v2.0 or later",
    "gpl-3.0": "GNU General Public License v3.0",
    "gpl-3.0-only": "GNU General Public License v3.0 only",
    "gpl-3.0-or-later": "GNU General Public License v3.0 or later",
    "agpl-1.0": "Affero General Public License v1.0",
    "agpl-3.0": "GNU Affero General Public License v3.0",
    "agpl-3.0-only": "GNU Affero General Public License v3.0 only",
    "agpl-3.0-or-later": "GNU Affero General Public License v3.0 or later",
    # weak copyleft
    "lgpl": "GNU Lesser General Public License Family",
    "lgpl-2.0": "GNU Lesser General Public License v2.0",
    "lgpl-2.0-only": "GNU Lesser General Public License v2.0 only",
    "lgpl-2.0-or-later": "GNU Lesser General Public License v2.0 or later",
    "lgpl-2.1": "GNU Lesser General Public License v2.1",
    "lgpl-2.1-only": "GNU Lesser General Public License v2.1 only",
    "lgpl-2.1-or-later": "GNU Lesser General Public License v2.1 or later",
    "lgpl-3.0": "GNU Lesser General Public License v3.0",
    "lgpl-3.0-only": "GNU Lesser General Public License v3.0 only",
    "lgpl-3.0-or-later": "GNU Lesser General Public License v3.0 or later",
    # file-level copyleft
    "mpl-1.0": "Mozilla Public License 1.0",
    "mpl-1.1": "Mozilla Public License 1.1",
    "mpl-2.0": "Mozilla Public License 2.0",
    "mpl-2.0-no-copyleft-exception": "Mozilla Public License 2.0 (no copyleft exception)",
    "epl-1.0": "Eclipse Public License 1.0",
    "epl-2.0": "Eclipse Public License 2.0",
    "eupl-1.0": "European Union Public License 1.0",
    "eupl-1.1": "European Union Public License 1.1",
    "eupl-1.2": "European Union Public License 1.2",
    "cddl-1.0": "Common Development and Distribution License 1.0",
    "cddl-1.1": "Common Development and Distribution License 1.1",
    "cpl-1.0": "Common Public License 1.0",
    "osl-1.0": "Open Software License 1.0",
    "osl-1.1": "Open Software License 1.1",
    "osl-2.0": "Open Software License 2.0",
    "osl-2.1": "Open Software License 2.1",
    "osl-3.0": "Open Software License 3.0",
    # creative commons
    "cc": "Creative Commons License Family",
    "cc0-1.0": "Creative Commons Zero v1.0 Universal",
    "cc-by-1.0": "Creative Commons Attribution 1.0 Generic",
    "cc-by-2.0": "Creative Commons Attribution 2.0 Generic",
    "cc-by-2.5": "Creative Commons Attribution 2.5 Generic",
    "cc-by-3.0": "Creative Commons Attribution 3.0 Unported",
    "cc-by-4.0": "Creative Commons Attribution 4.0 International",
    "cc-by-sa-1.0": "Creative Commons Attribution ShareAlike 1.0 Generic",
    "cc-by-sa-2.0": "Creative Commons Attribution ShareAlike 2.0 Generic",
    "cc-by-sa-2.5": "Creative Commons Attribution ShareAlike 2.5 Generic",
    "cc-by-sa-3.0": "Creative Commons Attribution ShareAlike 3.0 Unported",
    "cc-by-sa-4.0": "Creative Commons Attribution ShareAlike 4.0 International",
    "cc-by-nc-1.0": "Creative Commons Attribution Non Commercial 1.0 Generic",
    "cc-by-nc-2.0": "Creative Commons Attribution Non Commercial 2.0 Generic",
    "cc-by-nc-2.5": "Creative Commons Attribution Non Commercial 2.5 Generic",
    "cc-by-nc-3.0": "Creative Commons Attribution Non Commercial 3.0 Unported",
    "cc-by-nc-4.0": "Creative Commons Attribution Non Commercial 4.0 International",
    "cc-by-nc-nd-1.0": "Creative Commons Attribution Non Commercial No Derivatives 1.0 Generic",
    "cc-by-nc-nd-2.0": "Creative Commons Attribution Non Commercial No Derivatives 2.0 Generic",
    "cc-by-nc-nd-2.5": "Creative Commons Attribution Non Commercial No Derivatives 2.5 Generic",
    "cc-by-nc-nd-3.0": "Creative Commons Attribution Non Commercial No Derivatives 3.0 Unported",
    "cc-by-nc-nd-4.0": (
        "Creative Commons Attribution Non Commercial No Derivatives 4.0 International"
    ),
    "cc-by-nc-sa-1.0": "Creative Commons Attribution Non Commercial ShareAlike 1.0 Generic",
    "cc-by-nc-sa-2.0": "Creative Commons Attribution Non Commercial ShareAlike 2.0 Generic",
    "cc-by-nc-sa-2.5": "Creative Commons Attribution Non Commercial ShareAlike 2.5 Generic",
    "cc-by-nc-sa-3.0": "Creative Commons Attribution Non Commercial ShareAlike 3.0 Unported",
    "cc-by-nc-sa-4.0": "Creative Commons Attribution Non Commercial ShareAlike 4.0 International",
    "cc-by-nd-1.0": "Creative Commons Attribution No Derivatives 1.0 Generic",
    "cc-by-nd-2.0": "Creative Commons Attribution No Derivatives 2.0 Generic",
    "cc-by-nd-2.5": "Creative Commons Attribution No Derivatives 2.5 Generic",
    "cc-by-nd-3.0": "Creative Commons Attribution No Derivatives 3.0 Unported",
    "cc-by-nd-4.0": "Creative Commons Attribution No Derivatives 4.0 International",
    # microsoft
    "ms-pl": "Microsoft Public License",
    "ms-rl": "Microsoft Reciprocal License",
    # specialised
    "lppl-1.0": "LaTeX Project Public License v1.0",
    "lppl-1.1": "LaTeX Project Public License v1.1",
    "lppl-1.2": "LaTeX Project Public License v1.2",
    "lppl-1.3a": "LaTeX Project Public License v1.3a",
    "lppl-1.3c": "LaTeX Project Public License v1.3c",
    "ofl-1.0": "SIL Open Font License 1.0",
    "ofl-1.1": "SIL Open Font License 1.1",
    "ofl-1.1-rfn": "SIL Open Font License 1.1 with Reserved Font Name",
    "ofl-1.1-no-rfn": "SIL Open Font License 1.1 with no Reserved Font Name",
    # catch-alls
    "other": "Other",
    "proprietary": "Proprietary",
}


def default_license_table() -> LicenseTable:
    """Build the shipped license table (includes the ``na`` sentinel)."""
    return LicenseTable(
        {
            key: License(short_name=key, name=name)
            for key, name in _SPDX_NAMES.items()
        }
    )
