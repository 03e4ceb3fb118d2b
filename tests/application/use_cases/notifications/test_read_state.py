"""Tests for recipient-scoped listing and read-state transitions."""

from __future__ import annotations

from datetime import datetime

import pytest

from app.application.use_cases.notifications import (
    NotificationNotFoundError,
    RecipientRequiredError,
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    notify_user,
)
from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.infrastructure.repositories import NotificationRepository


def _seed(session, user_id: int, count: int) -> None:
    for index in range(count):
        notify_user(session, user_id, f"Mensaje {index}")


def _stored(session, notification_id: int) -> NotificationModel | None:
    session.expire_all()
    return session.get(NotificationModel, notification_id)


def test_pages_cover_every_notification_once_newest_first(session, make_user):
    user_id = make_user()
    _seed(session, user_id, 7)

    first = list_notifications(session, user_id, page=1, page_size=3)
    assert first.total == 7
    assert first.unread_count == 7
    assert first.total_pages == 3

    collected = []
    for page in range(1, first.total_pages + 1):
        collected.extend(list_notifications(session, user_id, page=page, page_size=3).items)

    ids = [item.id for item in collected]
    assert len(ids) == len(set(ids)) == 7
    assert ids == sorted(ids, reverse=True)
    timestamps = [item.created_at for item in collected]
    assert timestamps == sorted(timestamps, reverse=True)


def test_same_timestamp_ties_are_broken_by_id(session, make_user):
    user_id = make_user()
    shared = datetime(2024, 3, 1, 10, 0, 0)
    repository = NotificationRepository(session)
    created = [
        repository.create(
            Notification(id=None, recipient_id=user_id, message=f"n{index}", created_at=shared)
        )
        for index in range(4)
    ]

    page_one = list_notifications(session, user_id, page=1, page_size=2)
    page_two = list_notifications(session, user_id, page=2, page_size=2)

    expected = sorted((n.id for n in created), reverse=True)
    assert [n.id for n in page_one.items + page_two.items] == expected


def test_page_past_the_end_is_empty(session, make_user):
    user_id = make_user()
    _seed(session, user_id, 2)

    result = list_notifications(session, user_id, page=5, page_size=20)

    assert result.items == []
    assert result.total == 2
    assert result.total_pages == 1


def test_empty_inbox_has_zero_pages(session, make_user):
    result = list_notifications(session, make_user())

    assert result.total == 0
    assert result.total_pages == 0
    assert result.page_size == 20


def test_listing_only_returns_own_notifications(session, make_user):
    owner, other = make_user(), make_user()
    _seed(session, owner, 2)
    _seed(session, other, 3)

    assert list_notifications(session, owner).total == 2
    assert list_notifications(session, other).total == 3


def test_mark_as_read_is_idempotent(session, make_user):
    user_id = make_user()
    notify_user(session, user_id, "Agua restaurada")
    (target,) = list_notifications(session, user_id).items

    first = mark_notification_as_read(session, user_id, target.id)
    second = mark_notification_as_read(session, user_id, target.id)

    assert first.is_read is True
    assert first.read_at is not None
    assert second.is_read is True
    assert second.read_at == first.read_at
    assert count_unread_notifications(session, user_id) == 0
    assert session.query(NotificationModel).count() == 1


def test_mark_as_read_rejects_foreign_notification(session, make_user):
    owner, intruder = make_user(), make_user()
    notify_user(session, owner, "Privado")
    (target,) = list_notifications(session, owner).items

    with pytest.raises(NotificationNotFoundError):
        mark_notification_as_read(session, intruder, target.id)

    assert _stored(session, target.id).is_read is False


def test_mark_as_read_missing_notification(session, make_user):
    with pytest.raises(NotificationNotFoundError, match="Notificación no encontrada"):
        mark_notification_as_read(session, make_user(), 999)


def test_delete_rejects_foreign_notification(session, make_user):
    """Scenario: user A cannot delete user B's notification."""

    user_b, user_a = make_user(), make_user()
    notify_user(session, user_b, "Solo para B")
    (target,) = list_notifications(session, user_b).items

    with pytest.raises(NotificationNotFoundError):
        delete_notification(session, user_a, target.id)

    assert [n.id for n in list_notifications(session, user_b).items] == [target.id]


def test_delete_is_permanent(session, make_user):
    user_id = make_user()
    notify_user(session, user_id, "Temporal")
    (target,) = list_notifications(session, user_id).items

    delete_notification(session, user_id, target.id)

    assert _stored(session, target.id) is None
    with pytest.raises(NotificationNotFoundError):
        delete_notification(session, user_id, target.id)
    with pytest.raises(NotificationNotFoundError):
        mark_notification_as_read(session, user_id, target.id)


def test_mark_all_as_read_clears_unread_count(session, make_user):
    user_id, other = make_user(), make_user()
    _seed(session, user_id, 4)
    _seed(session, other, 2)
    (already_read, *_rest) = list_notifications(session, user_id).items
    mark_notification_as_read(session, user_id, already_read.id)

    assert mark_all_notifications_as_read(session, user_id) == 3
    assert list_notifications(session, user_id).unread_count == 0
    assert count_unread_notifications(session, other) == 2
    assert mark_all_notifications_as_read(session, user_id) == 0


def test_missing_recipient_is_rejected(session):
    with pytest.raises(RecipientRequiredError):
        list_notifications(session, None)
    with pytest.raises(RecipientRequiredError):
        mark_all_notifications_as_read(session, None)
    with pytest.raises(RecipientRequiredError):
        delete_notification(session, None, 1)


@pytest.mark.parametrize(("page", "page_size"), [(0, 20), (1, 0), (1, -1)])
def test_invalid_pagination_is_rejected(session, make_user, page, page_size):
    with pytest.raises(ValueError):
        list_notifications(session, make_user(), page=page, page_size=page_size)
