"""Exceptions raised by the forecast client."""


class ForecastError(Exception):
    """Base class for forecast client errors."""


class TransportError(ForecastError):
    """Raised when the request or the body read fails at the network level."""


class DecodeError(ForecastError):
    """Raised when a response body is not a valid forecast JSON object."""
