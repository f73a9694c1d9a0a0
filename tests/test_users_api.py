"""Tests for registration, login, profile update and token refresh"""

from datetime import timedelta

from jose import jwt

from chirpy.core.config import settings
from chirpy.core.security import ACCESS_TOKEN_ISSUER, REFRESH_TOKEN_ISSUER, issue_token


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def test_register_user(client):
    response = client.post(
        "/api/users",
        json={"email": "a@example.com", "password": "secret123"}
    )

    assert response.status_code == 201
    assert response.json() == {"id": 1, "email": "a@example.com"}


def test_register_rejects_invalid_email(client):
    response = client.post("/api/users", json={"email": "nope", "password": "x"})

    assert response.status_code == 422


def test_register_rejects_overlong_password(client):
    response = client.post(
        "/api/users",
        json={"email": "a@example.com", "password": "x" * 100}
    )

    assert response.status_code == 500


def test_password_is_not_stored_in_plain_text(client, registered_user, db_path):
    assert "secret123" not in db_path.read_text()


def test_login_returns_tokens(client, registered_user):
    response = client.post(
        "/api/login",
        json={"email": "a@example.com", "password": "secret123"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["email"] == "a@example.com"

    access = jwt.get_unverified_claims(data["token"])
    refresh = jwt.get_unverified_claims(data["refresh_token"])
    assert access["iss"] == "access"
    assert access["sub"] == "1"
    assert refresh["iss"] == "refresh"


def test_login_with_shorter_expiration(client, registered_user):
    response = client.post(
        "/api/login",
        json={"email": "a@example.com", "password": "secret123", "expires_in_seconds": 30}
    )

    claims = jwt.get_unverified_claims(response.json()["token"])
    assert claims["exp"] - claims["iat"] == 30


def test_login_wrong_password(client, registered_user):
    response = client.post(
        "/api/login",
        json={"email": "a@example.com", "password": "wrong"}
    )

    assert response.status_code == 401


def test_login_unknown_email(client):
    response = client.post(
        "/api/login",
        json={"email": "ghost@example.com", "password": "secret123"}
    )

    assert response.status_code == 401


def test_update_user(client, tokens):
    response = client.put(
        "/api/users",
        json={"email": "b@example.com", "password": "changed"},
        headers=auth_header(tokens["token"])
    )

    assert response.status_code == 200
    assert response.json() == {"id": 1, "email": "b@example.com"}

    old = client.post("/api/login", json={"email": "a@example.com", "password": "secret123"})
    new = client.post("/api/login", json={"email": "b@example.com", "password": "changed"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_update_user_without_token(client, registered_user):
    response = client.put("/api/users", json={"email": "b@example.com", "password": "x"})

    assert response.status_code == 401


def test_update_user_with_expired_token(client, registered_user):
    token = issue_token(ACCESS_TOKEN_ISSUER, 1, settings.jwt_secret, timedelta(seconds=-1))

    response = client.put(
        "/api/users",
        json={"email": "b@example.com", "password": "x"},
        headers=auth_header(token)
    )

    assert response.status_code == 401


def test_update_user_rejects_refresh_token(client, tokens):
    response = client.put(
        "/api/users",
        json={"email": "b@example.com", "password": "x"},
        headers=auth_header(tokens["refresh_token"])
    )

    assert response.status_code == 401


def test_update_unknown_user(client):
    token = issue_token(ACCESS_TOKEN_ISSUER, 99, settings.jwt_secret, timedelta(minutes=5))

    response = client.put(
        "/api/users",
        json={"email": "b@example.com", "password": "x"},
        headers=auth_header(token)
    )

    assert response.status_code == 404


def test_refresh_returns_new_access_token(client, tokens):
    response = client.post("/api/refresh", headers=auth_header(tokens["refresh_token"]))

    assert response.status_code == 200
    claims = jwt.get_unverified_claims(response.json()["token"])
    assert claims["iss"] == "access"
    assert claims["sub"] == "1"


def test_refresh_rejects_access_token(client, tokens):
    response = client.post("/api/refresh", headers=auth_header(tokens["token"]))

    assert response.status_code == 401


def test_refresh_rejects_expired_token(client, registered_user):
    token = issue_token(REFRESH_TOKEN_ISSUER, 1, settings.jwt_secret, timedelta(seconds=-1))

    response = client.post("/api/refresh", headers=auth_header(token))

    assert response.status_code == 401


def test_refresh_without_token(client):
    response = client.post("/api/refresh")

    assert response.status_code == 401
