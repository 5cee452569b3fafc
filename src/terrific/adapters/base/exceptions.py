"""Adapter-specific exceptions.

Every failure an adapter can produce is one of these. Each carries the HTTP
status the route answers with, and whether its message is shown to the
caller as the envelope's ``error`` (caller mistakes, misconfiguration) or
as ``details`` under the route's own failure label (upstream trouble).
"""

from __future__ import annotations


class AdapterError(Exception):
    """Base exception for adapter errors."""

    status_code: int = 500
    message_is_error: bool = False


class MissingParameterError(AdapterError):
    """Raised when a required query parameter is absent or empty."""

    status_code = 400
    message_is_error = True


class InvalidParameterError(AdapterError):
    """Raised when a query parameter cannot be interpreted (e.g. ``page=abc``)."""

    status_code = 400
    message_is_error = True


class ConfigurationError(AdapterError):
    """Raised when a required provider credential is not configured."""

    message_is_error = True

    def __str__(self) -> str:
        return f"Server misconfigured: {super().__str__()}"


class UpstreamHTTPError(AdapterError):
    """Raised when the provider answered with a non-success status.

    Args:
        message: Provider message or a synthesized description.
        upstream_status: Status the provider returned, if known.
        propagate: Answer the caller with ``upstream_status`` instead of 500.
    """

    def __init__(self, message: str, upstream_status: int | None = None, *, propagate: bool = False) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        if propagate and upstream_status is not None and 400 <= upstream_status < 600:
            self.status_code = upstream_status


class UpstreamSchemaError(AdapterError):
    """Raised when a response body has an unparseable or unexpected shape."""


class NetworkError(AdapterError):
    """Raised when the outbound call itself failed (DNS, connect, timeout)."""
