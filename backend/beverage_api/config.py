"""
Beverage API: Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, middleware, and the `python -m beverage_api` entry point.
When:  Loaded once at module import time.

Every value has a development default, so the service starts with no
environment at all. Override per deployment, e.g.:

    BACKEND_PORT=9000 LOG_LEVEL=debug CORS_ORIGINS=https://a.example,https://b.example
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Application ───────────────────────────────────────────────────────
    # What: Title shown in the OpenAPI document and startup logs
    app_name: str = Field(default="Beverage API")

    # What: Serve interactive docs (/docs, /redoc) and the OpenAPI schema
    # Disable in deployments that should not publish the API description
    docs_enabled: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # What: Allowed origins for cross-origin requests
    # Format: Comma-separated URLs (split by cors_origins_list below)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # What: Verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # BACKEND_PORT and backend_port both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
