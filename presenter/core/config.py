from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PRESENTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(default=False, description="DEBUG")

    # Query string parameter used when building pagination links
    page_name: str = Field(default="page", min_length=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
