"""Data models shared by the providers, the coordinator and the formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

UNKNOWN_VERSION = "unknown"

SortKey = Literal["downloads", "name"]


class Provider(str, Enum):
    """Upstream registry aggregators. ``ECOSYSTEMS`` is the primary one."""

    ECOSYSTEMS = "ecosystems"
    LIBRARIESIO = "librariesio"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Provider.ECOSYSTEMS: "ecosyste.ms",
    Provider.LIBRARIESIO: "Libraries.io",
}


@dataclass(frozen=True)
class DependencyRecord:
    """A package that depends on the queried package.

    Optional fields are either meaningful or ``None``; ``to_dict`` drops the
    ``None`` ones so consumers can treat a present key as a real value.
    """

    name: str
    version: str = UNKNOWN_VERSION
    downloads: int | float | None = None
    repository: str | None = None
    homepage: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Dependency name must be non-empty")
        if not self.version:
            raise ValueError("Dependency version must be non-empty")
        if self.downloads is not None and self.downloads < 0:
            raise ValueError("Downloads must be non-negative")

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"name": self.name, "version": self.version}
        if self.downloads is not None:
            data["downloads"] = self.downloads
        if self.repository is not None:
            data["repository"] = self.repository
        if self.homepage is not None:
            data["homepage"] = self.homepage
        return data


@dataclass(frozen=True)
class FetchConfiguration:
    """Options for a single ``fetch_reverse_dependencies`` call."""

    provider: Provider = Provider.ECOSYSTEMS
    credential: str | None = None
    enable_fallback: bool = True
    timeout: float = 30.0

    def __post_init__(self) -> None:
        # Accept plain strings ("ecosystems") from callers and the CLI.
        if not isinstance(self.provider, Provider):
            object.__setattr__(self, "provider", Provider(self.provider))
        if not self.credential:
            object.__setattr__(self, "credential", None)
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


@dataclass(frozen=True)
class FilterOptions:
    """Post-fetch filtering applied by :func:`revdeps.formatter.filter_dependencies`."""

    min_downloads: int | None = None
    max_results: int | None = None
    sort: SortKey | None = None

    def __post_init__(self) -> None:
        if self.sort is not None and self.sort not in ("downloads", "name"):
            raise ValueError(f"Invalid sort key: {self.sort}")
        if self.max_results is not None and self.max_results < 0:
            raise ValueError("max_results must be non-negative")


@dataclass
class FetchAttempt:
    """Outcome of one provider invocation: records on success, error otherwise."""

    provider: Provider
    records: list[DependencyRecord] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
