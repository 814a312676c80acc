"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed application configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Every field has a default so the dashboard starts against a local SQLite
  file with no configuration at all.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from feedback_aggregator.database.config.config import settings

# Example
db_name = settings.DB_DATABASE_NAME
model = settings.OPEN_AI_MODEL

Security
--------
- Never commit secrets or the `.env` file to source control.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_DRIVER_NAME: str = Field("sqlite", description="SQLAlchemy driver name (e.g., `sqlite`, `sqlite+pysqlite`).")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password credential.")
    DB_HOST: Optional[str] = Field(None, description="Hostname or IP address of the database server.")
    DB_DATABASE_NAME: str = Field("feedback.db", description="Database name, or file path for SQLite.")
    FRONTEND_URL: str = Field("*", description="Allowed CORS origin for browser clients.")
    API_KEY: str = Field("", description="API key for the hosted text-generation model.")
    OPEN_AI_MODEL: str = Field("gpt-4o-mini", description="Chat model used to summarize feedback.")
    LLM_BASE_URL: Optional[str] = Field(None, description="Optional OpenAI-compatible endpoint for the chat model.")
    SUMMARY_TEMPERATURE: float = Field(0.3, description="Sampling temperature for summaries.")
    LOG_LEVEL: str = Field("INFO", description="Root log level.")
    LOG_FORMAT: str = Field("simple", description="`simple` for human-readable logs, `json` for one JSON object per line.")
    INIT_MODE: str = Field("runtime", description="If 'runtime', create missing tables during app startup.")


# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object that contains the contents of the environment / .env file"""
