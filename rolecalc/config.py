"""Centralized configuration for rolecalc.

Uses Pydantic BaseSettings with environment variable loading and validation.
All ROLECALC_* environment variables are validated when settings are built.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine and logging settings loaded from environment variables."""

    model_config = {"env_prefix": "ROLECALC_", "case_sensitive": False, "extra": "ignore"}

    # Engine
    always_allow: str = Field(
        default="", description="Comma-separated roles that satisfy every requirement"
    )
    resource_actions: bool = Field(
        default=False, description="Decompose 'resource:action' roles"
    )
    write_extends_read: bool = Field(
        default=False, description="Let 'resource:write' satisfy 'resource:read'"
    )
    resource_action_separator: str = Field(
        default=":", description="Single character between resource and action"
    )

    # Logging
    log_format: str = Field(default="text", description="Log format: text or json")
    log_level: str = Field(default="INFO", description="Python log level")

    @field_validator("resource_action_separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        if len(v) != 1:
            msg = f"ROLECALC_RESOURCE_ACTION_SEPARATOR must be a single character, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            msg = f"ROLECALC_LOG_FORMAT must be 'text' or 'json', got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        import logging

        v = v.upper()
        if not isinstance(getattr(logging, v, None), int):
            msg = f"ROLECALC_LOG_LEVEL must be a valid Python log level, got '{v}'"
            raise ValueError(msg)
        return v

    @property
    def always_allow_set(self) -> set[str]:
        """Return parsed set of always-allowed roles."""
        if not self.always_allow.strip():
            return set()
        return {r.strip() for r in self.always_allow.split(",") if r.strip()}


def get_settings() -> Settings:
    """Build and validate settings from the current environment."""
    return Settings()
