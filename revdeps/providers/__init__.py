"""Provider adapters and the registry the coordinator selects from."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import httpx

from revdeps.models import DependencyRecord, FetchConfiguration, Provider
from revdeps.providers import ecosystems, librariesio

ProviderFetch = Callable[
    [httpx.AsyncClient, str, FetchConfiguration], Awaitable[list[DependencyRecord]]
]


async def _fetch_ecosystems(
    client: httpx.AsyncClient, package_name: str, config: FetchConfiguration
) -> list[DependencyRecord]:
    return await ecosystems.fetch(client, package_name)


async def _fetch_librariesio(
    client: httpx.AsyncClient, package_name: str, config: FetchConfiguration
) -> list[DependencyRecord]:
    return await librariesio.fetch(client, package_name, config.credential)


PROVIDER_REGISTRY: dict[Provider, ProviderFetch] = {
    Provider.ECOSYSTEMS: _fetch_ecosystems,
    Provider.LIBRARIESIO: _fetch_librariesio,
}


def get_provider(provider: Provider) -> ProviderFetch:
    return PROVIDER_REGISTRY[provider]


def alternate(provider: Provider) -> Provider:
    """Return the provider tried when *provider* fails."""
    if provider is Provider.ECOSYSTEMS:
        return Provider.LIBRARIESIO
    return Provider.ECOSYSTEMS


__all__ = ["PROVIDER_REGISTRY", "ProviderFetch", "alternate", "get_provider"]
