"""Map provider-specific package objects into :class:`DependencyRecord`."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from revdeps.exceptions import SchemaError
from revdeps.models import UNKNOWN_VERSION, DependencyRecord


@dataclass(frozen=True)
class FieldMap:
    """Upstream key names per record field, tried in order; first truthy wins."""

    name: str
    version: tuple[str, ...]
    downloads: tuple[str, ...]
    repository: tuple[str, ...]
    homepage: tuple[str, ...]


def encode_segment(value: str) -> str:
    """Percent-encode *value* as one URL path segment or query value.

    ``@scope/package`` becomes ``%40scope%2Fpackage``.
    """
    return quote(value, safe="")


def _first(obj: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = obj.get(key)
        if value:
            return value
    return None


def _coerce_downloads(value: Any) -> int | float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return int(number) if number.is_integer() else number


def _first_number(obj: dict[str, Any], keys: tuple[str, ...]) -> int | float | None:
    for key in keys:
        number = _coerce_downloads(obj.get(key))
        if number is not None:
            return number
    return None


def normalize_package(obj: Any, fields: FieldMap) -> DependencyRecord:
    """Build a record from one upstream object using the provider's *fields*."""
    if not isinstance(obj, dict):
        raise SchemaError("unexpected response format: package entry is not an object")

    name = obj.get(fields.name)
    if name is None or str(name) == "":
        raise SchemaError("unexpected response format: package entry has no name")

    version = _first(obj, fields.version)
    repository = _first(obj, fields.repository)
    homepage = _first(obj, fields.homepage)

    return DependencyRecord(
        name=str(name),
        version=str(version) if version else UNKNOWN_VERSION,
        downloads=_first_number(obj, fields.downloads),
        repository=str(repository) if repository else None,
        homepage=str(homepage) if homepage else None,
    )


def normalize_packages(items: list[Any], fields: FieldMap) -> list[DependencyRecord]:
    """Normalize every element of *items*, preserving upstream order."""
    return [normalize_package(item, fields) for item in items]
