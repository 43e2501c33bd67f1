# geowoot/core/errors.py


class GeowootError(Exception):
    """Base class for errors raised by geowoot services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GeowootError):
    """Bad or missing input. Rendered as HTTP 400 ``{"error": message}``."""


class UpstreamError(GeowootError):
    """The metadata site answered with an unexpected status."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class TransportError(GeowootError):
    """Network-level failure (DNS, connect, timeout) talking to an upstream."""
