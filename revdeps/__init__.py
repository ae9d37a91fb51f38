"""Find the npm packages that depend on a given package."""

__version__ = "0.1.0"

from revdeps.client import fetch_reverse_dependencies, get_reverse_dependencies  # noqa: E402
from revdeps.exceptions import (  # noqa: E402
    InvalidCredentialError,
    MissingCredentialError,
    NotFoundError,
    RateLimitError,
    RevdepsError,
    SchemaError,
    TransportError,
    UpstreamError,
)
from revdeps.formatter import (  # noqa: E402
    filter_dependencies,
    format_as_json,
    format_for_terminal,
)
from revdeps.models import (  # noqa: E402
    DependencyRecord,
    FetchConfiguration,
    FilterOptions,
    Provider,
)

__all__ = [
    "DependencyRecord",
    "FetchConfiguration",
    "FilterOptions",
    "InvalidCredentialError",
    "MissingCredentialError",
    "NotFoundError",
    "Provider",
    "RateLimitError",
    "RevdepsError",
    "SchemaError",
    "TransportError",
    "UpstreamError",
    "fetch_reverse_dependencies",
    "filter_dependencies",
    "format_as_json",
    "format_for_terminal",
    "get_reverse_dependencies",
]
