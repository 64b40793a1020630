"""CLI entry point: catalogguard.

Subcommands:
    catalogguard verify [ROOT]               # fail on hardcoded dependency versions
    catalogguard declarations [ROOT] --json  # list declarations and their verdicts
    catalogguard install-catalog [ROOT]      # write the bundled libs.versions.toml
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from catalogguard.core.config import VerifierSettings
from catalogguard.core.logging import setup_logging
from catalogguard.engines.catalog import install_catalog
from catalogguard.engines.version_policy.verifier import declaration_report, enforce
from catalogguard.exceptions import (
    CatalogResourceError,
    PolicyViolationError,
    UnreadableSourceError,
)

_ROOT_ARG = click.argument(
    "root",
    required=False,
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Log renderer (default: $CATALOGGUARD_LOG_FORMAT or console)",
)
def main(verbose: bool, log_format: str | None) -> None:
    """catalogguard: keep dependency versions in the version catalog."""
    setup_logging(level="DEBUG" if verbose else None, fmt=log_format)


@main.command("verify")
@_ROOT_ARG
def verify_cmd(root: Path) -> None:
    """Fail if any build file under ROOT declares a direct dependency version."""
    try:
        enforce(root.resolve(), VerifierSettings.from_env())
    except PolicyViolationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except UnreadableSourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)


@main.command("declarations")
@_ROOT_ARG
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def declarations_cmd(root: Path, as_json: bool) -> None:
    """List every dependency declaration under ROOT with its policy verdict."""
    try:
        rows = declaration_report(root.resolve(), VerifierSettings.from_env())
    except UnreadableSourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if as_json:
        payload = [
            {
                "file": site.file,
                "line": site.line,
                "configuration": site.configuration,
                "coordinate": site.coordinate,
                "violation": kind.value if kind else None,
            }
            for site, kind in rows
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    if not rows:
        click.echo("No dependency declarations found.")
        return

    by_file: dict[str, list] = {}
    for site, kind in rows:
        by_file.setdefault(site.file, []).append((site, kind))

    click.echo(f"Found {len(rows)} declaration(s) in {len(by_file)} build file(s)\n")
    for file, entries in by_file.items():
        click.echo(f"  {file}")
        for site, kind in entries:
            verdict = kind.value if kind else "ok"
            click.echo(f"    {site.line:>4}  {site.configuration} {site.coordinate}  [{verdict}]")
        click.echo()


@main.command("install-catalog")
@_ROOT_ARG
def install_catalog_cmd(root: Path) -> None:
    """Write the bundled version catalog into ROOT/build/generated/catalogs."""
    try:
        target = install_catalog(root.resolve())
    except CatalogResourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Version catalog written to {target}")


if __name__ == "__main__":
    main()
