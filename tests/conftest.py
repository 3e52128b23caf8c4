"""
Task Manager API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

import asyncio
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from taskapi.main import app
from taskapi.auth.models import User
from taskapi.auth.repository import UserRepositoryInterface
from taskapi.auth.router import get_user_repository
from taskapi.tasks.repository import InMemoryTaskRepository
from taskapi.tasks.router import get_task_repository


class InMemoryUserRepository(UserRepositoryInterface):
    """In-memory user repository for testing."""

    def __init__(self):
        self._users_by_username: Dict[str, User] = {}

    async def create(self, user: User) -> User:
        # Mirrors the unique index on users.username
        if user.username in self._users_by_username:
            raise DuplicateKeyError(f"duplicate key: username {user.username}")
        self._users_by_username[user.username] = user
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        return self._users_by_username.get(username)

    async def exists_by_username(self, username: str) -> bool:
        return username in self._users_by_username

    def clear(self) -> None:
        """Clear all users (synchronous helper for tests)."""
        self._users_by_username.clear()

    def get_by_username_sync(self, username: str) -> Optional[User]:
        """Synchronous helper for tests that need direct access."""
        return asyncio.run(self.get_by_username(username))


# Global in-memory repositories for tests
_test_task_repository = InMemoryTaskRepository()
_test_user_repository = InMemoryUserRepository()


async def override_get_task_repository():
    """Override dependency to use in-memory task repository."""
    return _test_task_repository


async def override_get_user_repository():
    """Override dependency to use in-memory user repository."""
    return _test_user_repository


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    _test_task_repository.clear()
    return _test_task_repository


@pytest.fixture
def user_repository():
    """Provide a fresh in-memory user repository for each test."""
    _test_user_repository.clear()
    return _test_user_repository


@pytest.fixture
def client(task_repository, user_repository):
    """Create test client with in-memory repositories."""
    app.dependency_overrides[get_task_repository] = override_get_task_repository
    app.dependency_overrides[get_user_repository] = override_get_user_repository

    yield TestClient(app)
    # Clean up overrides after test
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {"username": "testuser", "password": "testpassword123"}
    client.post("/api/auth/register", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post("/api/auth/login", json=registered_user)
    return response.text


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}
