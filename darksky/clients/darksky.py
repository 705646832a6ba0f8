from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from darksky.clients.transport import (
    DEFAULT_USER_AGENT,
    AsyncHttpxTransport,
    AsyncTransport,
    HttpxTransport,
    RawResponse,
    Transport,
)
from darksky.clients.urls import DEFAULT_BASE_URL, build_forecast_url, redact_api_key
from darksky.core.errors import TransportError
from darksky.models.request import ForecastOptions
from darksky.schemas.forecast import Forecast
from darksky.services.parsing import parse_forecast

if TYPE_CHECKING:
    from darksky.core.config import Settings

logger = logging.getLogger(__name__)

API_CALLS_HEADER = "x-forecast-api-calls"


def _time_machine_options(
    time: int | datetime, options: ForecastOptions | None
) -> ForecastOptions:
    return (options or ForecastOptions()).at(time)


def _log_response(raw: RawResponse, display_url: str) -> None:
    calls = {k.lower(): v for k, v in raw.headers.items()}.get(API_CALLS_HEADER)
    logger.debug(
        "Dark Sky API %s -> HTTP %d (%d bytes, api calls today: %s)",
        display_url,
        raw.status_code,
        len(raw.content),
        calls if calls is not None else "n/a",
    )


class DarkSkyClient:
    """Blocking client for the Dark Sky forecast and time-machine endpoints.

    The transport defaults to an :class:`HttpxTransport`; any object with
    ``get(url) -> RawResponse`` and ``close()`` can be supplied instead.
    """

    def __init__(
        self,
        api_key: str,
        *,
        transport: Transport | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        default_options: ForecastOptions | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._default_options = default_options
        self._transport: Transport = transport or HttpxTransport(
            timeout_seconds=timeout_seconds, user_agent=user_agent
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: Transport | None = None
    ) -> DarkSkyClient:
        return cls(
            settings.api_key,
            transport=transport,
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            user_agent=settings.user_agent,
            default_options=settings.default_options(),
        )

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> DarkSkyClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_forecast(
        self,
        latitude: float,
        longitude: float,
        options: ForecastOptions | None = None,
    ) -> Forecast:
        url = build_forecast_url(
            self._api_key,
            latitude,
            longitude,
            (options or ForecastOptions()).with_defaults(self._default_options),
            base_url=self._base_url,
        )
        display_url = redact_api_key(url, self._api_key)
        logger.debug("Requesting %s", display_url)
        try:
            raw = self._transport.get(url)
        except TransportError as e:
            logger.warning("Dark Sky request failed (%s): %s", display_url, e)
            e.url = display_url
            raise
        _log_response(raw, display_url)
        return parse_forecast(raw.content)

    def get_time_machine(
        self,
        latitude: float,
        longitude: float,
        time: int | datetime,
        options: ForecastOptions | None = None,
    ) -> Forecast:
        return self.get_forecast(
            latitude,
            longitude,
            _time_machine_options(time, options),
        )


class AsyncDarkSkyClient:
    def __init__(
        self,
        api_key: str,
        *,
        transport: AsyncTransport | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        default_options: ForecastOptions | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._default_options = default_options
        self._transport: AsyncTransport = transport or AsyncHttpxTransport(
            timeout_seconds=timeout_seconds, user_agent=user_agent
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: AsyncTransport | None = None
    ) -> AsyncDarkSkyClient:
        return cls(
            settings.api_key,
            transport=transport,
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            user_agent=settings.user_agent,
            default_options=settings.default_options(),
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> AsyncDarkSkyClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def get_forecast(
        self,
        latitude: float,
        longitude: float,
        options: ForecastOptions | None = None,
    ) -> Forecast:
        url = build_forecast_url(
            self._api_key,
            latitude,
            longitude,
            (options or ForecastOptions()).with_defaults(self._default_options),
            base_url=self._base_url,
        )
        display_url = redact_api_key(url, self._api_key)
        logger.debug("Requesting %s", display_url)
        try:
            raw = await self._transport.get(url)
        except TransportError as e:
            logger.warning("Dark Sky request failed (%s): %s", display_url, e)
            e.url = display_url
            raise
        _log_response(raw, display_url)
        return parse_forecast(raw.content)

    async def get_time_machine(
        self,
        latitude: float,
        longitude: float,
        time: int | datetime,
        options: ForecastOptions | None = None,
    ) -> Forecast:
        return await self.get_forecast(
            latitude,
            longitude,
            _time_machine_options(time, options),
        )


def get_forecast(
    api_key: str,
    latitude: float,
    longitude: float,
    options: ForecastOptions | None = None,
    *,
    timeout_seconds: float = 10.0,
) -> Forecast:
    """One-shot forecast request using a short-lived client."""
    with DarkSkyClient(api_key, timeout_seconds=timeout_seconds) as client:
        return client.get_forecast(latitude, longitude, options)
