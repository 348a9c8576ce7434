import os
from functools import lru_cache

from pydantic import BaseModel, Field

_ENV_FIELDS = (
    "COINMARKETCAP_API_KEY",
    "HOST",
    "PORT",
    "CMC_BASE_URL",
    "CMC_TIMEOUT_SEC",
    "CMC_LISTINGS_LIMIT",
)


class Settings(BaseModel):
    COINMARKETCAP_API_KEY: str | None = None
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CMC_BASE_URL: str = "https://pro-api.coinmarketcap.com"
    CMC_TIMEOUT_SEC: float = Field(default=10.0, gt=0)
    CMC_LISTINGS_LIMIT: int = Field(default=100, ge=1, le=5000)

    @classmethod
    def from_env(cls) -> "Settings":
        # unset or blank variables fall back to field defaults
        values = {}
        for name in _ENV_FIELDS:
            raw = os.getenv(name, "").strip()
            if raw:
                values[name] = raw
        return cls.model_validate(values)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
