"""Tests for network API endpoints."""

import pytest
from fastapi.testclient import TestClient

from social_graph.api.endpoints import network
from social_graph.config import get_settings
from social_graph.graph.analyzer import NetworkAnalyzer
from social_graph.graph.builder import build
from social_graph.main import create_app


class TestSuggestionsEndpoint:
    """Tests for /network/suggestions."""

    def test_suggestions(self, client: TestClient) -> None:
        """Test suggestions for a known user."""
        response = client.get("/api/v1/network/suggestions/A")
        assert response.status_code == 200
        assert response.json() == [{"user": "D", "score": 1}]

    def test_unknown_user(self, client: TestClient) -> None:
        """Test that unknown users get an empty list."""
        response = client.get("/api/v1/network/suggestions/ghost")
        assert response.status_code == 200
        assert response.json() == []


class TestSeparationEndpoint:
    """Tests for /network/separation."""

    def test_connected(self, client: TestClient) -> None:
        """Test a connected pair."""
        response = client.get(
            "/api/v1/network/separation",
            params={"source": "A", "target": "D"},
        )
        assert response.status_code == 200
        assert response.json() == {"source": "A", "target": "D", "hops": 2, "connected": True}

    def test_disconnected(self, client: TestClient) -> None:
        """Test the disconnected sentinel."""
        response = client.get(
            "/api/v1/network/separation",
            params={"source": "A", "target": "E"},
        )
        data = response.json()
        assert data["hops"] is None
        assert data["connected"] is False

    def test_missing_params(self, client: TestClient) -> None:
        """Test validation of required query params."""
        response = client.get("/api/v1/network/separation", params={"source": "A"})
        assert response.status_code == 422


class TestComponentsEndpoint:
    """Tests for /network/components."""

    def test_components(self, client: TestClient) -> None:
        """Test components sorted by size."""
        response = client.get("/api/v1/network/components")
        assert response.status_code == 200
        data = response.json()
        assert [c["size"] for c in data] == [4, 1]
        assert data[1]["members"] == ["E"]


class TestInfluenceEndpoint:
    """Tests for /network/influence."""

    def test_influence(self, client: TestClient) -> None:
        """Test degree ranking."""
        response = client.get("/api/v1/network/influence")
        assert response.status_code == 200
        data = response.json()
        assert data[0]["degree"] == 2
        assert len(data) == 5


class TestStatsEndpoint:
    """Tests for /network/stats."""

    def test_stats(self, client: TestClient) -> None:
        """Test aggregate statistics."""
        response = client.get("/api/v1/network/stats")
        assert response.status_code == 200
        data = response.json()
        assert data["total_users"] == 5
        assert data["total_connections"] == 6
        assert data["average_degree"] == pytest.approx(1.2)
        assert data["empty_network"] is False


class TestNotLoaded:
    """Tests for requests before a network is loaded."""

    def test_returns_503(self, app) -> None:
        """Test that endpoints answer 503 without a loaded network."""
        network.set_analyzer(None)
        client = TestClient(app)
        response = client.get("/api/v1/network/stats")
        assert response.status_code == 503

    def test_missing_dataset_leaves_network_unloaded(
        self, mock_settings, monkeypatch, tmp_path
    ) -> None:
        """Test startup with a dataset path that does not exist."""
        monkeypatch.setenv("DATASET_PATH", str(tmp_path / "missing.csv"))
        get_settings.cache_clear()

        with TestClient(create_app()) as client:
            response = client.get("/api/v1/network/components")
            assert response.status_code == 503
            ready = client.get("/api/v1/health/ready").json()
            assert ready["status"] == "degraded"

    def test_undecodable_dataset_leaves_network_unloaded(
        self, mock_settings, monkeypatch, tmp_path
    ) -> None:
        """Test that startup survives a dataset with invalid UTF-8."""
        path = tmp_path / "bad.csv"
        path.write_bytes(b"A,B\n\xff,C\n")
        monkeypatch.setenv("DATASET_PATH", str(path))
        get_settings.cache_clear()

        with TestClient(create_app()) as client:
            assert client.get("/api/v1/health/live").status_code == 200
            assert client.get("/api/v1/network/stats").status_code == 503
            assert client.get("/api/v1/health/ready").json()["status"] == "degraded"


class TestCurrentAnalyzer:
    """Tests for the non-raising analyzer accessor."""

    def test_none_when_unloaded(self) -> None:
        """Test the accessor before anything is loaded."""
        network.set_analyzer(None)
        assert network.current_analyzer() is None

    def test_returns_loaded_analyzer(self) -> None:
        """Test the accessor after set_analyzer."""
        analyzer = NetworkAnalyzer(build([("a", "b")]))
        network.set_analyzer(analyzer)
        try:
            assert network.current_analyzer() is analyzer
            assert network.get_analyzer() is analyzer
        finally:
            network.set_analyzer(None)


class TestReloadEndpoint:
    """Tests for /network/reload."""

    def test_reload_picks_up_new_file(self, client: TestClient, dataset_file) -> None:
        """Test that a reload serves the rewritten dataset."""
        dataset_file.write_text("A,B\nB,A\n", encoding="utf-8")

        response = client.post("/api/v1/network/reload")

        assert response.status_code == 200
        assert response.json() == {
            "dataset": str(dataset_file),
            "user_count": 2,
            "edge_count": 2,
        }
        assert client.get("/api/v1/network/stats").json()["total_users"] == 2

    def test_failed_reload_keeps_current_network(
        self, client: TestClient, monkeypatch, tmp_path
    ) -> None:
        """Test that a bad dataset returns 503 and the old network stays."""
        path = tmp_path / "bad.csv"
        path.write_bytes(b"\xff\xfe\n")
        monkeypatch.setenv("DATASET_PATH", str(path))
        get_settings.cache_clear()

        response = client.post("/api/v1/network/reload")

        assert response.status_code == 503
        assert response.json()["error"] == "DatasetDecodeError"
        assert client.get("/api/v1/network/stats").json()["total_users"] == 5

    def test_invalid_configuration_returns_500(
        self, client: TestClient, monkeypatch
    ) -> None:
        """Test that a bad environment value on reload maps to 500."""
        monkeypatch.setenv("GRAPH_INFLUENCE_LIMIT", "0")
        get_settings.cache_clear()

        response = client.post("/api/v1/network/reload")

        assert response.status_code == 500
        assert response.json()["error"] == "ConfigurationError"
        get_settings.cache_clear()
