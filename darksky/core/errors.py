from __future__ import annotations


class DarkSkyError(Exception):
    """Base class for every error raised by this library."""


class TransportError(DarkSkyError):
    """The request could not be completed or the provider answered non-2xx."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class ParseError(DarkSkyError):
    """The response body is not valid JSON or does not match the forecast schema.

    ``field`` is the dotted path of the first offending location
    (``"daily.data.0.time"``), or ``None`` when the document as a whole is bad.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)
