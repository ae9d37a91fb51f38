"""Filtering and output rendering for dependency lists."""

from __future__ import annotations

import json

import click

from revdeps.models import DependencyRecord, FilterOptions

_RULE_WIDTH = 60


def filter_dependencies(
    dependencies: list[DependencyRecord],
    options: FilterOptions | None = None,
) -> list[DependencyRecord]:
    """Apply download threshold, sort order and result limit, in that order.

    Records without a download count are treated as having 0 downloads.
    """
    filtered = list(dependencies)
    if options is None:
        return filtered

    if options.min_downloads is not None:
        filtered = [d for d in filtered if (d.downloads or 0) >= options.min_downloads]

    if options.sort == "downloads":
        filtered.sort(key=lambda d: d.downloads or 0, reverse=True)
    elif options.sort == "name":
        filtered.sort(key=lambda d: (d.name.casefold(), d.name))

    if options.max_results is not None:
        filtered = filtered[: options.max_results]

    return filtered


def format_as_json(dependencies: list[DependencyRecord]) -> str:
    return json.dumps(
        {
            "total": len(dependencies),
            "packages": [d.to_dict() for d in dependencies],
        },
        indent=2,
    )


def _format_number(num: int | float) -> str:
    return f"{num:,}"


def format_for_terminal(package_name: str, dependencies: list[DependencyRecord]) -> str:
    """Render a colored, numbered listing for humans."""
    rule = click.style("─" * _RULE_WIDTH, fg="bright_black")
    lines = [
        "",
        click.style("Packages that depend on ", fg="blue", bold=True)
        + click.style(package_name, fg="yellow", bold=True)
        + click.style(":", fg="blue", bold=True),
        rule,
        "",
    ]

    if not dependencies:
        lines.append(click.style("No reverse dependencies found.", fg="yellow"))
        lines.append("")
        return "\n".join(lines)

    lines.append(
        click.style("Found ", bold=True)
        + click.style(str(len(dependencies)), fg="green", bold=True)
        + click.style(" dependent packages:", bold=True)
    )
    lines.append("")

    for index, dep in enumerate(dependencies, start=1):
        num = click.style(f"{index:>3}. ", fg="bright_black")
        name = click.style(dep.name, fg="cyan")
        version = click.style(f"@{dep.version}", fg="bright_black")
        downloads = ""
        if dep.downloads:
            downloads = click.style(
                f" ({_format_number(dep.downloads)} downloads)", fg="green"
            )
        lines.append(f"{num}{name}{version}{downloads}")

        if dep.repository:
            lines.append(click.style(f"     {dep.repository}", fg="bright_black"))

    lines.append("")
    lines.append(rule)
    lines.append(click.style(f"Total: {len(dependencies)} packages", dim=True))
    lines.append("")

    return "\n".join(lines)
