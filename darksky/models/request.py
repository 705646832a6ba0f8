from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import StrEnum


class Units(StrEnum):
    AUTO = "auto"
    CA = "ca"
    UK2 = "uk2"
    US = "us"
    SI = "si"


class Block(StrEnum):
    CURRENTLY = "currently"
    MINUTELY = "minutely"
    HOURLY = "hourly"
    DAILY = "daily"
    ALERTS = "alerts"
    FLAGS = "flags"


class Language(StrEnum):
    AR = "ar"
    AZ = "az"
    BE = "be"
    BG = "bg"
    BN = "bn"
    BS = "bs"
    CA = "ca"
    CS = "cs"
    DA = "da"
    DE = "de"
    EL = "el"
    EN = "en"
    EO = "eo"
    ES = "es"
    ET = "et"
    FI = "fi"
    FR = "fr"
    HE = "he"
    HI = "hi"
    HR = "hr"
    HU = "hu"
    ID = "id"
    IS = "is"
    IT = "it"
    JA = "ja"
    KA = "ka"
    KN = "kn"
    KO = "ko"
    KW = "kw"
    LV = "lv"
    ML = "ml"
    MR = "mr"
    NB = "nb"
    NL = "nl"
    NO = "no"
    PA = "pa"
    PL = "pl"
    PT = "pt"
    RO = "ro"
    RU = "ru"
    SK = "sk"
    SL = "sl"
    SR = "sr"
    SV = "sv"
    TA = "ta"
    TE = "te"
    TET = "tet"
    TR = "tr"
    UK = "uk"
    UR = "ur"
    X_PIG_LATIN = "x-pig-latin"
    ZH = "zh"
    ZH_TW = "zh-tw"


def to_unix_seconds(value: int | datetime) -> int:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"time must be unix seconds or a datetime, got {type(value).__name__}")
    return value


def coerce_blocks(blocks: Iterable[Block | str]) -> tuple[Block, ...]:
    return tuple(dict.fromkeys(Block(b) for b in blocks))


@dataclass(frozen=True)
class ForecastOptions:
    """Optional query settings for a forecast or time-machine request.

    Leaving ``time`` unset requests the current forecast; setting it switches
    the request to time-machine mode for that instant.
    """

    units: Units | None = None
    lang: Language | None = None
    exclude: tuple[Block, ...] = field(default_factory=tuple)
    extend_hourly: bool = False
    time: int | datetime | None = None

    def __post_init__(self) -> None:
        if self.units is not None:
            object.__setattr__(self, "units", Units(self.units))
        if self.lang is not None:
            object.__setattr__(self, "lang", Language(self.lang))
        object.__setattr__(self, "exclude", coerce_blocks(self.exclude))
        if self.time is not None:
            to_unix_seconds(self.time)

    @property
    def is_time_machine(self) -> bool:
        return self.time is not None

    def with_units(self, units: Units | str) -> ForecastOptions:
        return replace(self, units=units)

    def with_language(self, lang: Language | str) -> ForecastOptions:
        return replace(self, lang=lang)

    def excluding(self, *blocks: Block | str) -> ForecastOptions:
        return replace(self, exclude=self.exclude + tuple(blocks))

    def extended(self) -> ForecastOptions:
        return replace(self, extend_hourly=True)

    def at(self, time: int | datetime) -> ForecastOptions:
        return replace(self, time=time)

    def with_defaults(self, defaults: ForecastOptions | None) -> ForecastOptions:
        """Fill fields left unset here from ``defaults``; fields set here win."""
        if defaults is None:
            return self
        return ForecastOptions(
            units=self.units if self.units is not None else defaults.units,
            lang=self.lang if self.lang is not None else defaults.lang,
            exclude=self.exclude or defaults.exclude,
            extend_hourly=self.extend_hourly or defaults.extend_hourly,
            time=self.time if self.time is not None else defaults.time,
        )

    def query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.units is not None:
            params["units"] = self.units.value
        if self.lang is not None:
            params["lang"] = self.lang.value
        if self.exclude:
            params["exclude"] = ",".join(b.value for b in self.exclude)
        if self.extend_hourly:
            params["extend"] = "hourly"
        return params
