"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_dish_repository, get_user_repository
from main import app
from test_fixtures import (
    REALISTIC_USERS,
    InMemoryDishRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def user_repo():
    repo = InMemoryUserRepository()
    for key, fields in REALISTIC_USERS.items():
        repo.add(**fields)
    return repo


@pytest.fixture
def dish_repo(user_repo):
    return InMemoryDishRepository(user_repo)


@pytest.fixture
def admin(user_repo):
    return next(u for u in user_repo.users.values() if u["username"] == "admin")


@pytest.fixture
def sarah(user_repo):
    return next(u for u in user_repo.users.values() if u["username"] == "sarah")


@pytest.fixture
def michael(user_repo):
    return next(u for u in user_repo.users.values() if u["username"] == "michael")


@pytest.fixture
def client(user_repo, dish_repo):
    """TestClient wired to the in-memory repositories (no lifespan, no MongoDB)"""
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_dish_repository] = lambda: dish_repo
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
