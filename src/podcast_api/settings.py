"""
podcast_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PODCAST_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables and GraphiQL.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "podcast-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "podcast-api"
    jwt_audience: str = "podcast-clients"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)
    jwt_ttl_minutes: int = Field(default=7 * 24 * 60, ge=1)
    # Clients send the session token in this header (not `Authorization: Bearer`).
    jwt_header: str = "x-jwt"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./podcasts.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every layer receives this object through dependencies; nothing reads os.environ directly.
