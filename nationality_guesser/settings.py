"""Centralised settings for the nationality guesser, loaded from env / .env."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class GuesserSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NATGUESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- general ---
    app_name: str = "Nationality Guesser"
    env: str = "dev"
    debug: bool = False

    # --- HTTP ---
    host: str = "0.0.0.0"
    port: int = 8080

    # --- upstream services ---
    nationalize_url: str = "https://api.nationalize.io"
    countries_url: str = "https://restcountries.com/v2/alpha"
    cognito_url: str = "https://cognito-idp.us-east-2.amazonaws.com/"
    http_timeout: float = 15.0

    # --- narration ---
    given_name_attribute: str = "given_name"
    pause_ms: int = 500


@lru_cache
def get_settings() -> GuesserSettings:
    return GuesserSettings()
