"""Configuration management using Pydantic Settings.

This module provides centralized, type-safe configuration for the Social Graph
analyzer. Configuration is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from social_graph.core.exceptions import ConfigurationError


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(env_prefix="APP_")

    name: str = "social-graph"
    env: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class APISettings(BaseSettings):
    """API server settings."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    reload: bool = False


class GraphSettings(BaseSettings):
    """Query engine limits.

    Each cap bounds the length of one ranked result list.
    """

    model_config = SettingsConfigDict(env_prefix="GRAPH_")

    suggestion_depth: int = Field(default=3, ge=1, le=100)
    suggestion_limit: int = Field(default=5, ge=1)
    component_limit: int = Field(default=5, ge=1)
    influence_limit: int = Field(default=5, ge=1)
    stats_top_limit: int = Field(default=10, ge=1)


class DatasetSettings(BaseSettings):
    """Friendship dataset location and record format."""

    model_config = SettingsConfigDict(env_prefix="DATASET_")

    path: Path = Path("Dataset.csv")
    encoding: str = "utf-8"
    user_delimiter: str = ","
    friend_delimiter: str = ";"
    symmetrize: bool = False
    skip_malformed: bool = False

    @field_validator("user_delimiter", "friend_delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Reject empty delimiters."""
        if not v:
            raise ValueError("delimiter must not be empty")
        return v


class Settings(BaseSettings):
    """Main settings container aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    api: APISettings = Field(default_factory=APISettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)
    dataset: DatasetSettings = Field(default_factory=DatasetSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once. A failed load is
    not cached.

    Returns:
        Settings: The application settings instance.

    Raises:
        ConfigurationError: If an environment value fails validation.
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid configuration: {', '.join(fields)}",
            details={"errors": [err["msg"] for err in e.errors()], "fields": fields},
            cause=e,
        ) from e
