"""Exceptions raised by the Aurora SDK.

Every error derives from AuroraError so callers can catch the whole family
with one clause. Nothing in the SDK retries; errors reach the awaiting caller
as raised.
"""


class AuroraError(Exception):
    """Base class for all SDK errors."""


class ConfigurationError(AuroraError):
    """The client is missing configuration needed for the call. No request was sent."""


class CapabilityUnavailableError(AuroraError):
    """The tenant does not have the feature a guarded operation needs."""

    def __init__(self, feature: str, display_name: str):
        self.feature = feature
        self.display_name = display_name
        super().__init__(
            f"{display_name} is not available. This tenant may not have the relevant "
            "template installed. Check client.capabilities() to see what features are enabled."
        )


class TransportError(AuroraError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, body: str = ""):
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(f"Aurora API {status_code}: {message}")


class SpecLoadError(TransportError):
    """The OpenAPI spec document could not be fetched."""


class AuroraConnectionError(AuroraError):
    """The request never got an HTTP response (DNS, refused connection, TLS...)."""
