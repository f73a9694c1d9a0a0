"""Общие фикстуры тестов.

Переменные окружения выставляются до импорта пакета: настройки читаются
один раз при импорте, а JWT_SECRET обязателен.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from chirpy.core.db import get_db
from chirpy.core.metrics import fileserver_hits
from chirpy.db.database import Database
from chirpy.main import app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "database.json"


@pytest.fixture
def database(db_path):
    return Database(db_path)


@pytest.fixture
def client(database):
    app.dependency_overrides[get_db] = lambda: database
    fileserver_hits.reset()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    response = client.post(
        "/api/users",
        json={"email": "a@example.com", "password": "secret123"}
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def tokens(client, registered_user):
    response = client.post(
        "/api/login",
        json={"email": "a@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    return response.json()
