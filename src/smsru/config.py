from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SMSRU_API_URL = "http://sms.ru"


class Settings(BaseSettings):
    """SMS.ru client settings, read from ``SMSRU_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SMSRU_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    API_ID: str = Field(default="")
    SENDER: str = Field(default="")
    API_URL: str = Field(default=SMSRU_API_URL)
    # Unset means no deadline on the HTTP call.
    TIMEOUT: float | None = Field(default=None)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
