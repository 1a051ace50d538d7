"""Signer settings via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings"]


class Settings(BaseSettings):
    """Central configuration — all values from environment."""

    model_config = SettingsConfigDict(env_prefix="SIGNATORY_")

    # Shared secret with the remote service
    secret: str = ""

    # Logging
    log_level: str = "INFO"
    log_json: bool = True
