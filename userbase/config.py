"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Values come from environment variables, then .env.{NODE_ENV}, then .env
    - get_settings() is cached (lru_cache) — single instance per process
    - node_env defaults to "development" when NODE_ENV is unset

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Env-specific file listed last: pydantic-settings gives later files priority
"""

import os
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    app_port: int = Field(3000, validation_alias=AliasChoices("APP_PORT", "PORT"))
    node_env: str = "development"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def get_app_port(self) -> int:
        return self.app_port

    def get_node_env(self) -> str:
        return self.node_env or "development"


def env_files(node_env: str | None = None) -> tuple[str, ...]:
    """Env files to load, lowest priority first."""
    env = node_env or os.environ.get("NODE_ENV") or "development"
    return (".env", f".env.{env}")


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=env_files())
