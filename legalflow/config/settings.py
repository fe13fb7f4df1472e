from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    webhook_url: str = ""
    webhook_timeout_seconds: float = 10.0
    anthropic_api_key: str = ""
    insight_model: str = ""
    insight_retention_seconds: float = 300.0
    cors_origins: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
