"""Tests for the fan-out engine (single user, barrio and global audiences)."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.application.use_cases.notifications import (
    list_notifications,
    notify_global,
    notify_neighborhood,
    notify_user,
)
from app.domain.entities import NOTIFICATION_CATEGORY_GENERAL, NOTIFICATION_CATEGORY_STATUS
from app.infrastructure.models import NotificationModel
from app.infrastructure.repositories import NotificationRepository


def _rows(session) -> list[NotificationModel]:
    session.expire_all()
    return session.query(NotificationModel).order_by(NotificationModel.id).all()


def _fail_for(monkeypatch: pytest.MonkeyPatch, failing_recipient: int) -> None:
    original_create = NotificationRepository.create

    def flaky_create(self, notification):
        if notification.recipient_id == failing_recipient:
            raise OperationalError("INSERT INTO notification", {}, Exception("disk I/O error"))
        return original_create(self, notification)

    monkeypatch.setattr(NotificationRepository, "create", flaky_create)


def test_notify_neighborhood_creates_one_row_per_member(session, make_barrio, make_user):
    """Scenario: Centro has three members and only they receive the notice."""

    centro = make_barrio("Centro")
    norte = make_barrio("Norte")
    members = [make_user(barrio_id=centro.id) for _ in range(3)]
    outsider = make_user(barrio_id=norte.id)

    created = notify_neighborhood(
        session, centro.id, "Water restored", NOTIFICATION_CATEGORY_STATUS
    )

    assert created == 3
    rows = _rows(session)
    assert sorted(row.user_id for row in rows) == sorted(members)
    assert all(row.message == "Water restored" for row in rows)
    assert all(row.category == NOTIFICATION_CATEGORY_STATUS for row in rows)
    assert all(row.is_read is False for row in rows)

    for member in members:
        page = list_notifications(session, member, page=1, page_size=20)
        assert len(page.items) == 1
        assert page.items[0].message == "Water restored"
        assert page.items[0].category == "status"
        assert page.items[0].is_read is False

    assert list_notifications(session, outsider).total == 0


def test_notify_neighborhood_without_members_is_not_an_error(session, make_barrio):
    empty = make_barrio("Oeste")

    assert notify_neighborhood(session, empty.id, "Corte programado") == 0
    assert _rows(session) == []


def test_notify_neighborhood_ignores_users_joining_afterwards(
    session, make_barrio, make_user
):
    sur = make_barrio("Sur")
    early = make_user(barrio_id=sur.id)

    notify_neighborhood(session, sur.id, "Aviso previo")
    late = make_user(barrio_id=sur.id)

    assert list_notifications(session, early).total == 1
    assert list_notifications(session, late).total == 0


def test_notify_global_reaches_every_user(session, make_barrio, make_user):
    centro = make_barrio("Centro")
    users = [
        make_user(barrio_id=centro.id),
        make_user(barrio_id=None),
        make_user(role="admin"),
    ]

    created = notify_global(session, "Nueva noticia: tarifas 2025", "news")

    assert created == len(users)
    assert sorted(row.user_id for row in _rows(session)) == sorted(users)


def test_notify_global_without_users_returns_zero(session):
    assert notify_global(session, "Nadie escucha") == 0
    assert _rows(session) == []


def test_notify_user_defaults_to_general_category(session, make_user):
    user_id = make_user()

    assert notify_user(session, user_id, "Tu queja fue recibida") == 1

    (row,) = _rows(session)
    assert row.user_id == user_id
    assert row.category == NOTIFICATION_CATEGORY_GENERAL
    assert row.created_at is not None


def test_fan_out_skips_failing_recipient(
    session, make_barrio, make_user, monkeypatch, caplog
):
    """One failing insert is logged and skipped; the rest still get the notice."""

    este = make_barrio("Este")
    first, failing, last = (make_user(barrio_id=este.id) for _ in range(3))
    _fail_for(monkeypatch, failing)

    with caplog.at_level("ERROR"):
        created = notify_neighborhood(session, este.id, "Agua intermitente", "status")

    assert created == 2
    assert sorted(row.user_id for row in _rows(session)) == sorted([first, last])
    assert f"usuario {failing}" in caplog.text


def test_notify_user_surfaces_storage_failure(session, make_user, monkeypatch):
    user_id = make_user()
    _fail_for(monkeypatch, user_id)

    with pytest.raises(OperationalError):
        notify_user(session, user_id, "No llegará")

    assert _rows(session) == []


def test_overlapping_fan_outs_are_not_deduplicated(session, make_barrio, make_user):
    centro = make_barrio("Centro")
    member = make_user(barrio_id=centro.id)

    notify_neighborhood(session, centro.id, "Mantenimiento mañana", "maintenance")
    notify_neighborhood(session, centro.id, "Servicio interrumpido", "status")

    page = list_notifications(session, member)
    assert page.total == 2
    assert {item.category for item in page.items} == {"maintenance", "status"}
