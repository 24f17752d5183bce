"""Unit tests for configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from social_graph.config import (
    APISettings,
    AppSettings,
    DatasetSettings,
    GraphSettings,
    Settings,
    get_settings,
)
from social_graph.core.exceptions import ConfigurationError


class TestAppSettings:
    """Tests for AppSettings."""

    def test_default_values(self) -> None:
        """Test default settings values."""
        settings = AppSettings()
        assert settings.name == "social-graph"
        assert settings.env == "development"
        assert settings.log_level == "INFO"

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(os.environ, {"APP_ENV": "production", "APP_DEBUG": "false"}):
            settings = AppSettings()
            assert settings.env == "production"
            assert settings.debug is False


class TestAPISettings:
    """Tests for APISettings."""

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(os.environ, {"API_PORT": "9000", "API_WORKERS": "4"}):
            settings = APISettings()
            assert settings.port == 9000
            assert settings.workers == 4


class TestGraphSettings:
    """Tests for GraphSettings."""

    def test_default_limits(self) -> None:
        """Test the default result caps."""
        settings = GraphSettings()
        assert settings.suggestion_depth == 3
        assert settings.suggestion_limit == 5
        assert settings.component_limit == 5
        assert settings.influence_limit == 5
        assert settings.stats_top_limit == 10

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(os.environ, {"GRAPH_SUGGESTION_LIMIT": "8"}):
            assert GraphSettings().suggestion_limit == 8

    def test_limits_must_be_positive(self) -> None:
        """Test validation of caps."""
        with pytest.raises(ValidationError):
            GraphSettings(component_limit=0)


class TestDatasetSettings:
    """Tests for DatasetSettings."""

    def test_default_values(self) -> None:
        """Test default dataset settings."""
        settings = DatasetSettings()
        assert settings.path == Path("Dataset.csv")
        assert settings.user_delimiter == ","
        assert settings.friend_delimiter == ";"
        assert settings.symmetrize is False

    def test_empty_delimiter_rejected(self) -> None:
        """Test delimiter validation."""
        with pytest.raises(ValidationError):
            DatasetSettings(friend_delimiter="")

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(os.environ, {"DATASET_PATH": "/tmp/x.csv", "DATASET_SYMMETRIZE": "true"}):
            settings = DatasetSettings()
            assert settings.path == Path("/tmp/x.csv")
            assert settings.symmetrize is True


class TestSettings:
    """Tests for the aggregated settings."""

    def test_sections(self) -> None:
        """Test that all sections are present."""
        settings = Settings()
        assert isinstance(settings.app, AppSettings)
        assert isinstance(settings.graph, GraphSettings)
        assert isinstance(settings.dataset, DatasetSettings)

    def test_get_settings_cached(self) -> None:
        """Test that get_settings returns the same instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()

    def test_invalid_env_raises_configuration_error(self) -> None:
        """Test that a bad environment value surfaces as ConfigurationError."""
        get_settings.cache_clear()
        with patch.dict(os.environ, {"GRAPH_SUGGESTION_LIMIT": "0"}):
            with pytest.raises(ConfigurationError) as exc_info:
                get_settings()

        assert "suggestion_limit" in exc_info.value.message
        assert isinstance(exc_info.value.cause, ValidationError)
        get_settings.cache_clear()

    def test_failed_load_is_not_cached(self) -> None:
        """Test that fixing the environment lets settings load again."""
        get_settings.cache_clear()
        with patch.dict(os.environ, {"DATASET_FRIEND_DELIMITER": ""}):
            with pytest.raises(ConfigurationError):
                get_settings()

        assert get_settings().dataset.friend_delimiter == ";"
        get_settings.cache_clear()
