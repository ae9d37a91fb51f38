"""Libraries.io API adapter (the secondary provider, needs an API key)."""

from __future__ import annotations

import httpx
import structlog

from revdeps.exceptions import (
    InvalidCredentialError,
    MissingCredentialError,
    NotFoundError,
    RateLimitError,
    SchemaError,
    TransportError,
    UpstreamError,
)
from revdeps.models import DependencyRecord, Provider
from revdeps.providers._normalize import FieldMap, encode_segment, normalize_packages

log = structlog.get_logger("revdeps.providers")

BASE_URL = "https://libraries.io/api"
PLATFORM = "NPM"

# Documented ceiling for authenticated Libraries.io requests.
REQUESTS_PER_MINUTE = 60

FIELDS = FieldMap(
    name="name",
    version=("latest_stable_release_number", "latest_release_number"),
    downloads=("downloads_count",),
    repository=("repository_url",),
    homepage=("homepage",),
)


def build_url(package_name: str, credential: str) -> str:
    return (
        f"{BASE_URL}/{PLATFORM}/{encode_segment(package_name)}/dependents"
        f"?api_key={encode_segment(credential)}"
    )


async def fetch(
    client: httpx.AsyncClient,
    package_name: str,
    credential: str | None,
) -> list[DependencyRecord]:
    """Fetch and normalize dependents of *package_name* from Libraries.io."""
    if not credential:
        raise MissingCredentialError("Libraries.io API key required for this provider")

    url = build_url(package_name, credential)
    provider = Provider.LIBRARIESIO.display_name

    try:
        response = await client.get(url, headers={"Accept": "application/json"})
    except httpx.RequestError as exc:
        raise TransportError(str(exc)) from exc

    if response.status_code == 401:
        raise InvalidCredentialError("Invalid Libraries.io API key")
    if response.status_code == 429:
        raise RateLimitError(provider, REQUESTS_PER_MINUTE)
    if response.status_code == 404:
        raise NotFoundError(package_name, provider)
    if not response.is_success:
        raise UpstreamError(response.status_code, response.reason_phrase, provider)

    try:
        data = response.json()
    except ValueError as exc:
        raise SchemaError("unexpected response format") from exc

    if not isinstance(data, list):
        raise SchemaError("unexpected response format")

    records = normalize_packages(data, FIELDS)
    log.debug("librariesio.fetched", package=package_name, count=len(records))
    return records
