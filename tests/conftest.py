"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test modules.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from social_graph.graph.builder import build
from social_graph.graph.store import GraphStore

# Set test environment before importing app modules
os.environ["APP_ENV"] = "development"
os.environ["APP_DEBUG"] = "true"


SAMPLE_RECORDS = """\
A,B;C
B,A;D
C,A
D,B
E,
"""


@pytest.fixture
def sample_store() -> GraphStore:
    """Four mutually linked users: A-B, A-C, B-D, declared both ways."""
    return build(
        [
            ("A", "B"),
            ("A", "C"),
            ("B", "A"),
            ("B", "D"),
            ("C", "A"),
            ("D", "B"),
        ]
    )


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    """Write the sample records, plus an isolated user E, to a file."""
    path = tmp_path / "Dataset.csv"
    path.write_text(SAMPLE_RECORDS, encoding="utf-8")
    return path


@pytest.fixture
def mock_settings(dataset_file: Path) -> Generator[Any, None, None]:
    """Provide settings pointing at the sample dataset.

    Args:
        dataset_file: Sample dataset path.

    Yields:
        Settings instance.
    """
    with patch.dict(
        os.environ,
        {
            "APP_ENV": "development",
            "APP_DEBUG": "true",
            "DATASET_PATH": str(dataset_file),
        },
    ):
        from social_graph.config import get_settings

        get_settings.cache_clear()
        yield get_settings()
        get_settings.cache_clear()


@pytest.fixture
def app(mock_settings: Any) -> Any:
    """Create a test application instance."""
    from social_graph.main import create_app

    return create_app()


@pytest.fixture
def client(app: Any) -> Generator[TestClient, None, None]:
    """Create a synchronous test client with the lifespan running.

    Args:
        app: FastAPI application instance.

    Yields:
        TestClient instance.
    """
    with TestClient(app) as test_client:
        yield test_client


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")
