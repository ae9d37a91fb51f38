"""ecosyste.ms packages API adapter (the primary provider)."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from revdeps.exceptions import NotFoundError, SchemaError, TransportError, UpstreamError
from revdeps.models import DependencyRecord, Provider
from revdeps.providers._normalize import FieldMap, encode_segment, normalize_packages

log = structlog.get_logger("revdeps.providers")

BASE_URL = "https://packages.ecosyste.ms/api/v1/registries/npmjs.org/packages"

FIELDS = FieldMap(
    name="name",
    version=("latest_release_number", "latest_version"),
    downloads=("downloads",),
    repository=("repository_url",),
    homepage=("homepage", "homepage_url"),
)


def build_url(package_name: str) -> str:
    return f"{BASE_URL}/{encode_segment(package_name)}/dependent_packages"


def _extract_packages(data: Any) -> list[Any]:
    """Accept both body shapes the service has served.

    Older revisions return a bare array; newer ones wrap it as
    ``{"dependent_packages": [...]}``. The bare array is checked first.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("dependent_packages"), list):
        return data["dependent_packages"]
    raise SchemaError("unexpected response format")


async def fetch(client: httpx.AsyncClient, package_name: str) -> list[DependencyRecord]:
    """Fetch and normalize dependents of *package_name* from ecosyste.ms."""
    url = build_url(package_name)
    provider = Provider.ECOSYSTEMS.display_name

    try:
        # Without an explicit Accept header the service answers with HTML.
        response = await client.get(url, headers={"Accept": "application/json"})
    except httpx.RequestError as exc:
        raise TransportError(str(exc)) from exc

    if response.status_code == 404:
        raise NotFoundError(package_name, provider)
    if not response.is_success:
        raise UpstreamError(response.status_code, response.reason_phrase, provider)

    try:
        data = response.json()
    except ValueError as exc:
        raise SchemaError("unexpected response format") from exc

    records = normalize_packages(_extract_packages(data), FIELDS)
    log.debug("ecosystems.fetched", package=package_name, count=len(records))
    return records
