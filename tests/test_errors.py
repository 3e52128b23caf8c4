"""
Task Manager API - Error Handling Tests

Store failures and unexpected exceptions map to 500 responses.
"""

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from taskapi.auth.router import get_user_repository
from taskapi.main import app
from taskapi.tasks.router import get_task_repository


class BrokenRepository:
    """Task repository whose every call fails."""

    def __init__(self, error: Exception):
        self.error = error

    async def create(self, task):
        raise self.error

    async def get_by_id(self, task_id):
        raise self.error

    async def list_page(self, skip, limit):
        raise self.error

    async def count(self):
        raise self.error


class BrokenUserRepository:
    """User repository whose every call fails."""

    def __init__(self, error: Exception):
        self.error = error

    async def create(self, user):
        raise self.error

    async def get_by_username(self, username):
        raise self.error

    async def exists_by_username(self, username):
        raise self.error


@pytest.fixture
def failing_client(client):
    """Client whose task repository raises the error given to it."""

    def _make(error: Exception) -> TestClient:
        async def broken():
            return BrokenRepository(error)

        app.dependency_overrides[get_task_repository] = broken
        return TestClient(app, raise_server_exceptions=False)

    return _make


class TestErrorHandling:
    """Tests for the application-wide exception handlers."""

    def test_store_failure_is_500_with_detail(self, failing_client, auth_headers):
        """Database errors should return 500 carrying the store's message."""
        client = failing_client(ServerSelectionTimeoutError("mongodb unreachable"))

        response = client.get("/api/tasks", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Database error", "detail": "mongodb unreachable"}

    def test_unexpected_error_is_generic_500(self, failing_client, auth_headers):
        """Other exceptions should return a generic 500 without internal detail."""
        client = failing_client(RuntimeError("secret internals"))

        response = client.get("/api/tasks/some-id", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong!"}
        assert "secret internals" not in response.text

    def test_gate_runs_before_store(self, failing_client):
        """Without a token the request is rejected before touching the store."""
        client = failing_client(RuntimeError("should not be reached"))

        response = client.get("/api/tasks")
        assert response.status_code == 401

    def test_login_store_failure_is_500_with_detail(self, client):
        """Login against an unreachable user store should return 500 with the store's message."""
        async def broken():
            return BrokenUserRepository(ServerSelectionTimeoutError("users unreachable"))

        app.dependency_overrides[get_user_repository] = broken
        failing = TestClient(app, raise_server_exceptions=False)

        response = failing.post("/api/auth/login", json={"username": "john_doe", "password": "password123"})
        assert response.status_code == 500
        assert response.json() == {"error": "Database error", "detail": "users unreachable"}
