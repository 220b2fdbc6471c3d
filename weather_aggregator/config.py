import os
from typing import Literal, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    app_name: str = "weather-aggregator"
    log_level: str = "INFO"

    # Provider (weatherapi.com); a missing key is reported per request, not at startup
    weatherapi_key: Optional[SecretStr] = None
    weatherapi_base_url: str = "https://api.weatherapi.com/v1"
    weatherapi_timeout_seconds: float = 5.0

    # Resolver
    default_location: str = "Cape Town"

    # Cache
    cache_backend: Literal["redis", "memory"] = "redis"
    redis_url: str = "redis://localhost:6379/0"
    cache_ttl_seconds: int = 900

    @field_validator("default_location")
    @classmethod
    def _strip_default_location(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_location must not be blank")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Secret files win over the environment, which is only the fallback.
        return init_settings, file_secret_settings, env_settings, dotenv_settings

    @property
    def api_key(self) -> Optional[str]:
        if self.weatherapi_key is None:
            return None
        return self.weatherapi_key.get_secret_value().strip() or None


def load_settings() -> Settings:
    secrets_dir = os.environ.get("SECRETS_DIR", "/run/secrets")
    if os.path.isdir(secrets_dir):
        return Settings(_secrets_dir=secrets_dir)
    return Settings()


settings = load_settings()
