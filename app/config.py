"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── State store ─────────────────────────────────────────────────────────
    redis_url: str = "redis://localhost:6379/0"
    state_namespace: str = "agrisynch_store_v20"

    # ── Gemini ──────────────────────────────────────────────────────────────
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_diagnostic_model: str = "gemini-3-pro-preview"
    gemini_transcription_model: str = "gemini-2.5-flash-native-audio-preview-12-2025"
    gemini_intent_model: str = "gemini-3-flash-preview"
    gemini_speech_model: str = "gemini-2.5-flash-preview-tts"
    gemini_speech_voice: str = "Kore"
    gemini_thinking_budget: int = 32768
    gemini_timeout_seconds: float = 30.0

    # ── Weather simulation ──────────────────────────────────────────────────
    weather_forecast_days: int = 4
    weather_seed: int | None = None

    # ── Diagnostics ─────────────────────────────────────────────────────────
    diagnostic_history_limit: int = 20

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
