"""Fallback coordinator: try the configured provider, fall back once on failure."""

from __future__ import annotations

from contextlib import AsyncExitStack

import httpx
import structlog

from revdeps import __version__
from revdeps.exceptions import RevdepsError
from revdeps.formatter import filter_dependencies
from revdeps.models import (
    DependencyRecord,
    FetchAttempt,
    FetchConfiguration,
    FilterOptions,
    Provider,
)
from revdeps.providers import alternate, get_provider

log = structlog.get_logger("revdeps.client")

USER_AGENT = f"revdeps/{__version__}"


def create_client(
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the HTTP client used when the caller does not inject one.

    Redirects are followed; both registries redirect moved package URLs.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
        transport=transport,
    )


async def _attempt(
    client: httpx.AsyncClient,
    provider: Provider,
    package_name: str,
    config: FetchConfiguration,
) -> FetchAttempt:
    """Run one provider and capture its outcome instead of raising.

    Only library errors are captured; cancellation propagates.
    """
    log.debug("revdeps.fetch", provider=provider.value, package=package_name)
    try:
        records = await get_provider(provider)(client, package_name, config)
    except RevdepsError as exc:
        return FetchAttempt(provider=provider, error=exc)
    return FetchAttempt(provider=provider, records=records)


async def fetch_reverse_dependencies(
    package_name: str,
    config: FetchConfiguration | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[DependencyRecord]:
    """Return the packages depending on *package_name*, in upstream order.

    The configured provider is tried first. When it fails and fallback is
    enabled, the other provider is tried once; if that also fails the
    *first* error is raised.

    An injected *client* is used as-is and left open; otherwise a client is
    created from ``config.timeout`` and closed before returning.

    Raises:
        RevdepsError: one of its subclasses, from the primary provider.
    """
    config = config or FetchConfiguration()

    async with AsyncExitStack() as stack:
        if client is None:
            client = await stack.enter_async_context(create_client(config.timeout))

        primary = await _attempt(client, config.provider, package_name, config)
        if primary.ok:
            return primary.records

        if not config.enable_fallback:
            raise primary.error  # type: ignore[misc]

        secondary_provider = alternate(config.provider)
        log.warning(
            "revdeps.fallback",
            package=package_name,
            failed=config.provider.value,
            fallback=secondary_provider.value,
            error=str(primary.error),
        )
        secondary = await _attempt(client, secondary_provider, package_name, config)
        if secondary.ok:
            return secondary.records

        log.warning(
            "revdeps.fallback_failed",
            package=package_name,
            provider=secondary_provider.value,
            error=str(secondary.error),
        )
        raise primary.error  # type: ignore[misc]


async def get_reverse_dependencies(
    package_name: str,
    config: FetchConfiguration | None = None,
    filters: FilterOptions | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[DependencyRecord]:
    """Fetch reverse dependencies and apply *filters* in one call."""
    records = await fetch_reverse_dependencies(package_name, config, client=client)
    return filter_dependencies(records, filters)
