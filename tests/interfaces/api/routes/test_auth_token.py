"""Tests for the authentication token endpoint."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.domain.entities import ROLE_ADMIN, ROLE_CLIENT
from app.infrastructure.models import UserModel
from app.infrastructure.security import get_password_hash
from main import create_app


def _login(client: TestClient, email: str, password: str):
    return client.post(
        "/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )


@pytest.mark.parametrize("role", [ROLE_ADMIN, ROLE_CLIENT])
def test_login_returns_token_and_role(make_user, role: str) -> None:
    make_user(role=role, email="vecino@example.com", password="StrongPass123")

    with TestClient(create_app()) as client:
        response = _login(client, "vecino@example.com", "StrongPass123")

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert payload["role"] == role
    assert bool(payload["access_token"])
    assert payload["must_change_password"] is False


def test_login_with_wrong_password_is_rejected(make_user) -> None:
    make_user(email="vecino@example.com", password="StrongPass123")

    with TestClient(create_app()) as client:
        response = _login(client, "vecino@example.com", "otra-clave")

    assert response.status_code == 401
    assert response.json()["detail"] == "Credenciales incorrectas"


def test_login_of_inactive_user_is_forbidden(make_user) -> None:
    make_user(email="inactivo@example.com", password="StrongPass123", is_active=False)

    with TestClient(create_app()) as client:
        response = _login(client, "inactivo@example.com", "StrongPass123")

    assert response.status_code == 403


def test_password_change_invalidates_existing_token(session, make_user) -> None:
    """Tokens carry a password signature, so a new password revokes them."""

    user_id = make_user(email="vecino@example.com", password="StrongPass123")

    with TestClient(create_app()) as client:
        token = _login(client, "vecino@example.com", "StrongPass123").json()["access_token"]
        headers = {"Authorization": f"Bearer {token}"}
        assert client.get("/notifications/unread-count", headers=headers).status_code == 200

        user = session.get(UserModel, user_id)
        user.password = get_password_hash("NuevaClave456")
        session.commit()

        response = client.get("/notifications/unread-count", headers=headers)

    assert response.status_code == 401
    assert response.json()["detail"] == "Credenciales inválidas"
