from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RULECHECK_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # True for structured JSON, False for console output

    # Compiled patterns shared by every Regex rule in the process
    REGEX_CACHE_SIZE: int = 256

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("REGEX_CACHE_SIZE")
    @classmethod
    def _positive_cache(cls, v: int) -> int:
        if v < 1:
            raise ValueError("REGEX_CACHE_SIZE must be at least 1")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
