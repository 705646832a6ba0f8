from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Icon(StrEnum):
    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"
    WIND = "wind"
    FOG = "fog"
    CLOUDY = "cloudy"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    # Reserved by the provider, not currently emitted.
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    TORNADO = "tornado"


class PrecipitationType(StrEnum):
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"


class Severity(StrEnum):
    ADVISORY = "advisory"
    WATCH = "watch"
    WARNING = "warning"


E = TypeVar("E", bound=StrEnum)


def _lookup(enum_cls: type[E], value: str | None) -> E | None:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class DataPoint(_WireModel):
    time: int

    summary: str | None = None
    icon: str | None = None

    sunrise_time: int | None = None
    sunset_time: int | None = None
    moon_phase: float | None = None

    nearest_storm_distance: float | None = None
    nearest_storm_bearing: float | None = None

    precip_intensity: float | None = None
    precip_intensity_error: float | None = None
    precip_intensity_max: float | None = None
    precip_intensity_max_time: int | None = None
    precip_probability: float | None = None
    precip_type: str | None = None
    precip_accumulation: float | None = None

    temperature: float | None = None
    temperature_high: float | None = None
    temperature_high_time: int | None = None
    temperature_low: float | None = None
    temperature_low_time: int | None = None
    temperature_min: float | None = None
    temperature_min_time: int | None = None
    temperature_max: float | None = None
    temperature_max_time: int | None = None

    apparent_temperature: float | None = None
    apparent_temperature_high: float | None = None
    apparent_temperature_high_time: int | None = None
    apparent_temperature_low: float | None = None
    apparent_temperature_low_time: int | None = None
    apparent_temperature_min: float | None = None
    apparent_temperature_min_time: int | None = None
    apparent_temperature_max: float | None = None
    apparent_temperature_max_time: int | None = None

    dew_point: float | None = None
    humidity: float | None = None
    pressure: float | None = None
    wind_speed: float | None = None
    wind_gust: float | None = None
    wind_gust_time: int | None = None
    wind_bearing: float | None = None
    cloud_cover: float | None = None
    uv_index: int | None = None
    uv_index_time: int | None = None
    visibility: float | None = None
    ozone: float | None = None

    @property
    def timestamp(self) -> datetime:
        return datetime.fromtimestamp(self.time, tz=timezone.utc)

    @property
    def icon_kind(self) -> Icon | None:
        return _lookup(Icon, self.icon)

    @property
    def precip_kind(self) -> PrecipitationType | None:
        return _lookup(PrecipitationType, self.precip_type)


class DataBlock(_WireModel):
    data: list[DataPoint] = Field(default_factory=list)
    summary: str | None = None
    icon: str | None = None

    @property
    def icon_kind(self) -> Icon | None:
        return _lookup(Icon, self.icon)


class Alert(_WireModel):
    title: str
    time: int

    expires: int | None = None
    description: str | None = None
    uri: str | None = None
    severity: str | None = None
    regions: list[str] | None = None

    @property
    def severity_kind(self) -> Severity | None:
        return _lookup(Severity, self.severity)


class Flags(BaseModel):
    model_config = ConfigDict(
        alias_generator=lambda name: name.replace("_", "-"),
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    darksky_unavailable: str | None = None
    darksky_stations: list[str] | None = None
    datapoint_stations: list[str] | None = None
    isd_stations: list[str] | None = None
    lamp_stations: list[str] | None = None
    madis_stations: list[str] | None = None
    metar_stations: list[str] | None = None
    metno_license: str | None = None
    nearest_station: float | None = None
    sources: list[str] | None = None
    units: str | None = None


class Forecast(_WireModel):
    """One location query: coordinates, timezone and whichever blocks the
    provider returned. Blocks that were excluded or are unavailable for the
    location stay ``None``."""

    latitude: float
    longitude: float
    timezone: str

    offset: float | None = None
    currently: DataPoint | None = None
    minutely: DataBlock | None = None
    hourly: DataBlock | None = None
    daily: DataBlock | None = None
    alerts: list[Alert] | None = None
    flags: Flags | None = None
