"""Tests for the FastAPI service mode."""

from __future__ import annotations

import logging

from fastapi.testclient import TestClient

from repotutor.agents import RepoCrawlerAgent
from repotutor.config import ConfigError
from repotutor.orchestrator import Orchestrator
from repotutor.providers import MockSnapshotProvider, ProviderError, SnapshotProvider
from repotutor.service import app as service_app
from repotutor.service import create_app


class _DownProvider(SnapshotProvider):
    name = "down"

    def fetch(self, repo_url: str):  # type: ignore[no-untyped-def]
        raise ProviderError("Snapshot endpoint returned 503: Service Unavailable")


def _client(provider: SnapshotProvider) -> TestClient:
    app = create_app(lambda: Orchestrator(crawler=RepoCrawlerAgent(provider)))
    return TestClient(app)


def test_health_endpoint() -> None:
    response = _client(MockSnapshotProvider()).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_agents_endpoint() -> None:
    response = _client(MockSnapshotProvider()).get("/agents")

    assert response.status_code == 200
    data = response.json()
    assert data["crawler"] == {
        "name": "RepoCrawler",
        "role": "Fetch repository snapshot from the snapshot provider",
        "status": "active",
    }
    assert set(data) == {"crawler", "analyzer", "teacher"}


def test_tutorial_endpoint_returns_journey() -> None:
    response = _client(MockSnapshotProvider()).post(
        "/tutorial", json={"url": "https://github.com/acme/widgets"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["error"] is None
    assert data["document"]["project_title"] == "widgets"
    assert [step["agent"] for step in data["steps"]] == ["RepoCrawler", "CodeAnalyzer", "Teacher"]


def test_tutorial_endpoint_markdown_format() -> None:
    response = _client(MockSnapshotProvider()).post(
        "/tutorial", json={"url": "https://github.com/acme/widgets", "format": "markdown"}
    )

    data = response.json()
    assert data["success"] is True
    assert data["document"].startswith("# widgets Tutorial")


def test_tutorial_failure_is_reported_in_body() -> None:
    response = _client(_DownProvider()).post("/tutorial", json={"url": "https://github.com/acme/x"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["document"] is None
    assert data["error"] == "RepoCrawler failed: Snapshot endpoint returned 503: Service Unavailable"
    assert data["steps"] == [
        {
            "agent": "RepoCrawler",
            "success": False,
            "error": "Snapshot endpoint returned 503: Service Unavailable",
        }
    ]


def test_config_error_maps_to_bad_request() -> None:
    def factory() -> Orchestrator:
        raise ConfigError("Unknown provider kind 'ftp'")

    client = TestClient(create_app(factory))

    response = client.post("/tutorial", json={"url": "u"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Unknown provider kind 'ftp'"}


def test_run_service_configures_logging_for_uvicorn(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    calls = {}

    def fake_run(app, **kwargs):  # type: ignore[no-untyped-def]
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(service_app.uvicorn, "run", fake_run)

    service_app.run_service(
        host="0.0.0.0",
        port=9000,
        log_level="debug",
        orchestrator_factory=lambda: Orchestrator(crawler=RepoCrawlerAgent(MockSnapshotProvider())),
    )

    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 9000
    assert calls["log_level"] == logging.DEBUG
    assert calls["log_config"]["loggers"]["uvicorn.access"]["level"] == "DEBUG"
    assert logging.getLogger("repotutor").level == logging.DEBUG
    assert len(logging.getLogger("repotutor").handlers) == 1
