from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from darksky.clients.transport import DEFAULT_USER_AGENT
from darksky.clients.urls import DEFAULT_BASE_URL
from darksky.models.request import ForecastOptions, Language, Units


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DARKSKY_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(min_length=1)
    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=3, max_length=256)

    units: Units = Field(default=Units.AUTO)
    lang: Language | None = Field(default=None)

    def default_options(self) -> ForecastOptions:
        return ForecastOptions(units=self.units, lang=self.lang)


def load_settings() -> Settings:
    return Settings()
