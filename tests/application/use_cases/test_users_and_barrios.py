"""Tests for the user and barrio use cases backing the audience directory."""

from __future__ import annotations

import pytest

from app.application.use_cases.barrios import create_barrio, get_or_create_barrio
from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
    record_login,
)
from app.domain.entities import ROLE_ADMIN
from app.infrastructure.repositories import UserRepository


def test_barrio_names_are_unique(session):
    centro = create_barrio(session, name="  Centro ")

    assert centro.name == "Centro"
    with pytest.raises(ValueError, match="Ya existe"):
        create_barrio(session, name="centro")
    with pytest.raises(ValueError):
        create_barrio(session, name="   ")
    assert get_or_create_barrio(session, name="Centro").id == centro.id


def test_create_user_assigns_role_and_barrio(session):
    centro = create_barrio(session, name="Centro")

    user = create_user(
        session,
        name="Ana",
        email="ana@example.com",
        password="StrongPass123",
        role_alias=ROLE_ADMIN,
        barrio_id=centro.id,
    )

    assert user.is_admin()
    assert user.barrio_id == centro.id
    assert UserRepository(session).list_ids_by_barrio(centro.id) == [user.id]
    assert UserRepository(session).list_ids_by_role_alias(ROLE_ADMIN) == [user.id]

    with pytest.raises(ValueError, match="ya está registrado"):
        create_user(session, name="Otra", email="ANA@example.com", password="x")
    with pytest.raises(ValueError, match="Barrio no encontrado"):
        create_user(session, name="Luis", email="luis@example.com", password="x", barrio_id=99)
    with pytest.raises(ValueError, match="Rol no permitido"):
        create_user(session, name="Luis", email="luis@example.com", password="x", role_alias="root")


def test_authenticate_and_record_login(session):
    user = create_user(session, name="Ana", email="ana@example.com", password="StrongPass123")

    found, status = authenticate_user(session, "ANA@example.com", "StrongPass123")
    assert status is AuthenticationStatus.SUCCESS
    assert found.id == user.id

    assert authenticate_user(session, "ana@example.com", "mala")[1] is (
        AuthenticationStatus.INVALID_CREDENTIALS
    )

    record_login(session, user.id)
    assert UserRepository(session).get(user.id).last_login is not None
