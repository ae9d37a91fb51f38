"""Custom exceptions for revdeps."""


class RevdepsError(Exception):
    """Base exception for all provider and coordinator errors."""


class NotFoundError(RevdepsError):
    """Raised when the queried registry does not know the package."""

    def __init__(self, package_name: str, provider: str):
        self.package_name = package_name
        self.provider = provider
        super().__init__(f'Package "{package_name}" not found on {provider}')


class UpstreamError(RevdepsError):
    """Raised for a non-2xx response without a more specific classification."""

    def __init__(self, status_code: int, status_text: str, provider: str | None = None):
        self.status_code = status_code
        self.status_text = status_text
        self.provider = provider
        prefix = f"{provider} request failed" if provider else "API request failed"
        super().__init__(f"{prefix}: {status_code} {status_text}".rstrip())


class InvalidCredentialError(RevdepsError):
    """Raised when the provider rejects the supplied API key (HTTP 401)."""


class RateLimitError(RevdepsError):
    """Raised when the provider answers HTTP 429."""

    def __init__(self, provider: str, requests_per_minute: int | None = None):
        self.provider = provider
        self.requests_per_minute = requests_per_minute
        msg = f"{provider} rate limit exceeded"
        if requests_per_minute is not None:
            msg += f" ({requests_per_minute} requests per minute)"
        super().__init__(msg)


class MissingCredentialError(RevdepsError):
    """Raised before any I/O when a provider needing an API key gets none."""


class SchemaError(RevdepsError):
    """Raised when a successful response does not have the expected shape."""


class TransportError(RevdepsError):
    """Raised for network failures below HTTP (DNS, connect, timeout, reset)."""
