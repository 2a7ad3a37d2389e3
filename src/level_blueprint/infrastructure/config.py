"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from level_blueprint.domain.entities import BlueprintVariant


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    The service holds no upstream credential; every request brings its own.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = "https://api.openai.com/v1"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 2800
    upstream_timeout_seconds: float = 600.0
    blueprint_variant: BlueprintVariant = BlueprintVariant.WITH_LAYOUT_DATA
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
