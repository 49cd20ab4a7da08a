"""Application configuration models and utilities."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    gateway_endpoint: HttpUrl = Field(
        default="https://kwjo934pq7.execute-api.us-east-1.amazonaws.com/test",
        alias="GATEWAY_ENDPOINT",
    )
    gateway_api_key: Optional[str] = Field(default=None, alias="GATEWAY_API_KEY")
    gateway_timeout: float = Field(default=10.0, gt=0, alias="GATEWAY_TIMEOUT")
    use_mock_data: bool = Field(default=False, alias="USE_MOCK_DATA")
    app_name: str = Field(default="API Gateway Relay", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    model_config = SettingsConfigDict(
        env_file=(".env.local", ".env"), env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached app settings instance."""
    return Settings()
