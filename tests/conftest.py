"""
Shared fixtures: a fresh in-memory store per test, wired into the API through
the get_data_access dependency override.
"""

import pytest
from fastapi.testclient import TestClient

from hopelink.api.main import app
from hopelink.core.config import settings
from hopelink.core.dependencies import get_data_access
from hopelink.data_access.memory import MemoryDataAccess
from hopelink.models.user import UserCreate
from hopelink.models.initiative import InitiativeCreate


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def data_access():
    return MemoryDataAccess()


@pytest.fixture
def client(data_access):
    app.dependency_overrides[get_data_access] = lambda: data_access
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(data_access):
    def _make_user(username: str, user_type: str = "donor", **overrides):
        fields = {
            "username": username,
            "email": f"{username}@example.com",
            "password": "unused",
            "user_type": user_type,
            "full_name": username.title(),
        }
        fields.update(overrides)
        return data_access.create_user(UserCreate(**fields))
    return _make_user


@pytest.fixture
def make_initiative(data_access):
    def _make_initiative(runner_id: int = 1, **overrides):
        fields = {
            "title": "Books for Grade 5",
            "description": "Textbooks for a rural school.",
            "category": "education",
            "goal_amount": 10000,
            "runner_id": runner_id,
        }
        fields.update(overrides)
        return data_access.create_initiative(InitiativeCreate(**fields))
    return _make_initiative


@pytest.fixture
def register_payload():
    def _register_payload(username: str = "maria", **overrides) -> dict:
        payload = {
            "username": username,
            "email": f"{username}@example.com",
            "password": "s3cret-pass",
            "userType": "donor",
            "fullName": "Maria Lopez",
        }
        payload.update(overrides)
        return payload
    return _register_payload
