"""
Task Manager API - Health Endpoint Tests
"""

import pytest
from fastapi.testclient import TestClient

from taskapi.main import app
from taskapi.config import settings


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client):
        """Health endpoint should return 200 OK."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_includes_service_info(self, client):
        """Health endpoint should report status, service name and version."""
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["service"] == settings.APP_NAME
        assert data["version"] == settings.APP_VERSION


class TestRootEndpoint:
    """Tests for the root endpoint."""

    def test_root_greets(self, client):
        """Root endpoint should greet and point at the docs."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Hello, Task Manager!"
        assert "version" in data

    def test_openapi_lists_routes(self, client):
        """Generated OpenAPI document should describe the task and auth routes."""
        paths = client.get("/openapi.json").json()["paths"]
        assert "/api/tasks" in paths
        assert "/api/tasks/{task_id}" in paths
        assert "/api/auth/login" in paths
