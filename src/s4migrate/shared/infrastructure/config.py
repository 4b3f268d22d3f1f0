"""
Application configuration using Pydantic Settings.

Loads configuration from S4M_-prefixed environment variables and .env file.
"""

import logging
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GATEWAY_MODES = ("mock", "live", "vsp")


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="S4M_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="s4migrate-core", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")
    log_redaction_enabled: bool = Field(default=True, description="Redact credentials and home paths in logs")

    # Gateway
    gateway_mode: str = Field(default="mock", description="Gateway mode (mock/live/vsp)")
    scan_fixture_path: Optional[str] = Field(
        default=None,
        description="Scan fixture JSON for mock mode (defaults to the packaged fixture)",
    )

    # Scanner
    scan_namespaces: List[str] = Field(
        default=["Z*", "Y*"],
        description="Repository search probes for custom objects",
    )
    code_bearing_types: List[str] = Field(
        default=["CLAS", "INTF", "PROG", "FUGR", "INCL"],
        description="Object types whose source is read",
    )

    # Rules
    extra_rule_paths: List[str] = Field(
        default=[],
        description="Additional YAML rule files loaded after the packaged catalog",
    )

    # Remediation
    remediation_dry_run: bool = Field(default=True, description="Never write transformed sources back")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env.lower() == "production"

    @field_validator("gateway_mode")
    @classmethod
    def _validate_gateway_mode(cls, value: str) -> str:
        mode = value.lower()
        if mode not in GATEWAY_MODES:
            raise ValueError(f"gateway_mode must be one of {GATEWAY_MODES}, got {value!r}")
        return mode

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


# Global settings instance
settings = Settings()
