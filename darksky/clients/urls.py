from __future__ import annotations

from decimal import Decimal

import httpx

from darksky.models.request import ForecastOptions, to_unix_seconds

DEFAULT_BASE_URL = "https://api.darksky.net/forecast"

_REDACTED = "REDACTED"


def _format_coordinate(value: float) -> str:
    # Shortest round-trip digits, never in exponent form.
    return format(Decimal(repr(float(value))), "f")


def build_forecast_url(
    api_key: str,
    latitude: float,
    longitude: float,
    options: ForecastOptions | None = None,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Build the request URL for a forecast, or a time-machine request when
    ``options.time`` is set. Coordinates are passed through unvalidated."""
    options = options or ForecastOptions()

    location = f"{_format_coordinate(latitude)},{_format_coordinate(longitude)}"
    if options.time is not None:
        location = f"{location},{to_unix_seconds(options.time)}"

    url = httpx.URL(f"{base_url.rstrip('/')}/{api_key}/{location}")
    params = options.query_params()
    if params:
        url = url.copy_merge_params(params)
    return str(url)


def _encoded_segment(api_key: str) -> str:
    return httpx.URL(f"http://localhost/{api_key}/").raw_path.decode("ascii")


def redact_api_key(url: str, api_key: str) -> str:
    if not api_key:
        return url
    for segment in (f"/{api_key}/", _encoded_segment(api_key)):
        url = url.replace(segment, f"/{_REDACTED}/")
    return url
