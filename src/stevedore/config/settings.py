"""Configuration management with Pydantic Settings.

Environment variables are loaded from:
1. Environment variables (highest priority)
2. .env file (development)
3. Defaults (lowest priority)
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging format."""

    JSON = "json"
    TEXT = "text"


class CodefreshSettings(BaseSettings):
    """Codefresh API configuration."""

    model_config = SettingsConfigDict(env_prefix="CODEFRESH_")

    api_url: str = Field(
        default="https://g.codefresh.io",
        description="Codefresh API base URL",
    )
    api_token: str = Field(default="", description="Codefresh API token")
    timeout_seconds: float = Field(default=30.0, description="Request timeout")

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class Settings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    Codefresh settings use the CODEFRESH_ prefix (e.g., CODEFRESH_API_TOKEN).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="stevedore", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.TEXT, description="Logging format")

    # Kubeconfig and credential lookup defaults
    kubeconfig: Path = Field(
        default=Path("~/.kube/config"),
        alias="KUBECONFIG",
        validate_default=True,
        description="Path to the kubeconfig file",
    )
    default_namespace: str = Field(
        default="default",
        description="Namespace of the service account to read",
    )
    default_service_account: str = Field(
        default="default",
        description="Service account whose secret is registered",
    )

    codefresh: CodefreshSettings = Field(default_factory=CodefreshSettings)

    @field_validator("kubeconfig")
    @classmethod
    def expand_kubeconfig(cls, v: Path) -> Path:
        """Expand ~ and keep only the first entry of a KUBECONFIG list."""
        first = str(v).split(":")[0] or "~/.kube/config"
        return Path(first).expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to avoid re-parsing environment variables.
    """
    return Settings()
