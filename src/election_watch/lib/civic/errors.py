"""Error types raised by the civic-data provider client."""


class CivicProviderError(Exception):
    """Base class for civic-data provider failures.

    ``message`` is safe to show to API callers; it never contains the API
    key, request URL, or the address being resolved.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class ProviderUnavailableError(CivicProviderError):
    """The provider was unreachable or answered with a non-2xx status.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: HTTP status code, or None for transport-level failures.
        body: Response body text, when a response was received.
    """

    def __init__(
        self,
        provider_name: str,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(provider_name, message, status_code=status_code)
        self.body = body


class MalformedResponseError(CivicProviderError):
    """The provider answered 2xx but the payload could not be decoded."""


class ProviderConfigurationError(CivicProviderError):
    """The provider credential is missing. Fatal and operator-correctable."""
