"""CLI entry point: revdeps.

Usage:
    revdeps express                        # colored listing, sorted by downloads
    revdeps express --json --limit 20      # machine-readable output
    revdeps @scope/pkg -p librariesio -k KEY --no-fallback
"""

from __future__ import annotations

import asyncio
import sys

import click

from revdeps import __version__
from revdeps.client import fetch_reverse_dependencies
from revdeps.core.logging import setup_logging
from revdeps.exceptions import RevdepsError
from revdeps.formatter import filter_dependencies, format_as_json, format_for_terminal
from revdeps.models import FetchConfiguration, FilterOptions, Provider

_PROVIDERS = [p.value for p in Provider]


def _fail(message: str, hint: str | None = None) -> None:
    click.echo(f"Error: {message}", err=True)
    if hint:
        click.echo(hint, err=True)
    sys.exit(1)


@click.command("revdeps")
@click.argument("package", required=False)
@click.option("-j", "--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "-m", "--min-downloads", type=click.IntRange(min=0), default=None, help="Minimum downloads"
)
@click.option(
    "-l", "--limit", type=click.IntRange(min=0), default=None, help="Limit number of results"
)
@click.option(
    "-s",
    "--sort",
    type=click.Choice(["downloads", "name"]),
    default="downloads",
    show_default=True,
    help="Sort results by",
)
@click.option(
    "-p",
    "--provider",
    default=Provider.ECOSYSTEMS.value,
    show_default=True,
    help=f"API provider: {', '.join(_PROVIDERS)}",
)
@click.option(
    "-k",
    "--api-key",
    envvar="LIBRARIESIO_API_KEY",
    default=None,
    help="Libraries.io API key [env: LIBRARIESIO_API_KEY]",
)
@click.option(
    "--fallback/--no-fallback",
    default=True,
    help="Fall back to the other provider when the first one fails",
)
@click.option(
    "--timeout",
    envvar="REVDEPS_TIMEOUT",
    type=float,
    default=30.0,
    show_default=True,
    help="Per-request timeout in seconds [env: REVDEPS_TIMEOUT]",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.version_option(version=__version__, prog_name="revdeps")
def main(
    package: str | None,
    as_json: bool,
    min_downloads: int | None,
    limit: int | None,
    sort: str,
    provider: str,
    api_key: str | None,
    fallback: bool,
    timeout: float,
    verbose: bool,
) -> None:
    """Find all packages that depend on PACKAGE."""
    setup_logging("DEBUG" if verbose else None)

    if not package:
        _fail("package name is required", "Usage: revdeps <package-name>")

    if provider not in _PROVIDERS:
        _fail(f'Invalid provider "{provider}". Must be one of: {", ".join(_PROVIDERS)}')

    if provider == Provider.LIBRARIESIO.value and not api_key and not fallback:
        _fail(
            "Libraries.io API key required. "
            "Provide via --api-key or LIBRARIESIO_API_KEY env variable",
            "Get your free API key from: https://libraries.io/account",
        )

    if timeout <= 0:
        _fail("--timeout must be positive")

    config = FetchConfiguration(
        provider=Provider(provider),
        credential=api_key,
        enable_fallback=fallback,
        timeout=timeout,
    )

    try:
        dependencies = asyncio.run(fetch_reverse_dependencies(package, config))
    except RevdepsError as exc:
        _fail(str(exc))
        return

    if not as_json:
        click.echo(f"Found {len(dependencies)} dependent packages", err=True)

    filtered = filter_dependencies(
        dependencies,
        FilterOptions(min_downloads=min_downloads, max_results=limit, sort=sort),
    )

    if as_json:
        click.echo(format_as_json(filtered))
    else:
        click.echo(format_for_terminal(package, filtered))


if __name__ == "__main__":
    main()
