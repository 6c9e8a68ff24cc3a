from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Short URL"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./shorturl.db"

    # Caching is disabled when no Redis URL is configured
    REDIS_URL: Optional[str] = None
    CACHE_TTL: int = 86400

    BASE_URL: str = "http://localhost:8080"

    # Short code mapping. Changing any of these breaks codes already handed out.
    CODEC_ALPHABET: Optional[str] = None
    CODEC_SECONDARY_ALPHABET: Optional[str] = None
    CODEC_USE_SECONDARY: bool = False
    CODEC_OFFSET: int = 0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
