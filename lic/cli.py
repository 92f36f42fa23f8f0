"""CLI entry point: lic.

Subcommands:
    lic report golang --src-path ./project     # scan a Go project, print the report
    lic report golang --json                   # same, JSON output
    lic version                                # print the lic version
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from lic import __version__
from lic.config import Config
from lic.context import ScanContext
from lic.core.logging import setup_logging
from lic.exceptions import ComplianceViolationError, NoDependenciesFoundError, ScanCancelledError
from lic.report.render import render_json, render_text
from lic.scanner import scan

EXIT_VIOLATIONS = 1
EXIT_FATAL = 2


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """lic: license compliance reports for your sources."""
    setup_logging("DEBUG" if verbose else None)


@main.command("version")
def version() -> None:
    """Print the lic version."""
    click.echo(f"lic CLI version: {__version__}")


@main.group("report")
def report() -> None:
    """Create a report of sources."""


@report.command("golang")
@click.option(
    "--src-path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Local path of sources to scan",
)
@click.option(
    "--whitelist-domain",
    "whitelist_domains",
    multiple=True,
    help="Whitelisted import domain (repeatable, replaces the default list)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--timeout", type=float, default=None, help="Give up on the whole scan after N seconds")
def golang(
    src_path: Path,
    whitelist_domains: tuple[str, ...],
    as_json: bool,
    timeout: float | None,
) -> None:
    """Scan a Go project and report dependencies that violate the whitelist."""
    config = Config.from_env()
    if whitelist_domains:
        config = config.with_whitelist(whitelist_domains)

    ctx = ScanContext(timeout=timeout)
    try:
        result = asyncio.run(scan(src_path.resolve(), config=config, ctx=ctx))
    except NoDependenciesFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FATAL)
    except ScanCancelledError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FATAL)

    click.echo(render_json(result) if as_json else render_text(result), nl=as_json)

    try:
        result.raise_for_violations()
    except ComplianceViolationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_VIOLATIONS)


report.add_command(golang, name="go")


if __name__ == "__main__":
    main()
