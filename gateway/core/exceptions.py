"""
Upstream failure kinds that are NOT part of the OperationResult taxonomy.
Raised by the upstream client; mapped to 502/504 by the app exception handler.
"""


class UpstreamError(Exception):
    """Base class: the upstream could not give us a usable answer."""

    status_code = 502

    def __init__(self, message: str, *, method: str | None = None, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.method = method
        self.path = path


class UpstreamUnavailableError(UpstreamError):
    """DNS, connection refused, connection reset and similar transport failures."""


class UpstreamTimeoutError(UpstreamUnavailableError):
    status_code = 504


class UpstreamResponseError(UpstreamError):
    """Upstream answered but the body could not be parsed."""
