"""Errors raised while talking to the OpenStreetMap services."""


class UpstreamError(RuntimeError):
    """An external service call failed; the message is safe to show clients."""


class FetchError(UpstreamError):
    """The request could not be completed or the service answered with an error status."""


class ParseError(UpstreamError):
    """The service answered with a body that is not valid JSON."""


class GeocodeNotFoundError(UpstreamError):
    """The geocoder returned no match for the requested place name."""

    def __init__(self, message: str = "No results"):
        super().__init__(message)
