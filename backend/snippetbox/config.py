"""
Snippetbox: Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory (logging level) and the server entry point
       (listen address).
When:  Loaded once at module import time.

Defaults reproduce the classic tutorial server: listen on every interface,
port 4000, INFO logging. Nothing else is configurable because nothing else
varies between deployments.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults, so an empty environment starts a working
    server on ``:4000``.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # What: Interface to bind. Empty string means every interface (IPv6 and
    # IPv4 where dual-stack is available), as the ":4000" address form does.
    host: str = Field(default="", description="Interface to listen on")

    port: int = Field(default=4000, ge=1, le=65535, description="TCP port to listen on")

    # ── Logging ───────────────────────────────────────────────────────────
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

    @property
    def addr(self) -> str:
        """
        What: The listen address in ``host:port`` form, e.g. ``:4000``.
        Used in the startup log line and in bind error messages.
        """
        return f"{self.host}:{self.port}"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


# Singleton instance, immutable after startup
settings = Settings()
