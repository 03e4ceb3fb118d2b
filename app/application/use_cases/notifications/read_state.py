"""Recipient-scoped retrieval and read-state transitions for notifications."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Notification, NotificationPage
from app.infrastructure.repositories import NotificationRepository

from .errors import NotificationNotFoundError, RecipientRequiredError

logger = logging.getLogger(__name__)


def list_notifications(
    session: Session,
    recipient_id: int | None,
    *,
    page: int = 1,
    page_size: int | None = None,
) -> NotificationPage:
    """Return one page of the recipient's notifications, newest first.

    ``total`` and ``unread_count`` are always computed from the stored rows.
    """

    _require_recipient(recipient_id)
    if page_size is None:
        page_size = get_settings().notifications_page_size
    if page < 1:
        raise ValueError("La página debe ser mayor o igual a 1")
    if page_size < 1:
        raise ValueError("El tamaño de página debe ser mayor o igual a 1")

    repository = NotificationRepository(session)
    items = repository.list_for_user(
        recipient_id,
        offset=(page - 1) * page_size,
        limit=page_size,
    )
    return NotificationPage(
        page=page,
        page_size=page_size,
        total=repository.count_for_user(recipient_id),
        unread_count=repository.count_for_user(recipient_id, unread_only=True),
        items=list(items),
    )


def count_unread_notifications(session: Session, recipient_id: int | None) -> int:
    """Return how many notifications the recipient has not read yet."""

    _require_recipient(recipient_id)
    return NotificationRepository(session).count_for_user(recipient_id, unread_only=True)


def mark_notification_as_read(
    session: Session, recipient_id: int | None, notification_id: int
) -> Notification:
    """Mark an owned notification as read; repeating the call is a no-op."""

    _require_recipient(recipient_id)
    repository = NotificationRepository(session)
    try:
        notification = repository.mark_as_read(notification_id, user_id=recipient_id)
    except SQLAlchemyError:
        session.rollback()
        raise
    if notification is None:
        raise NotificationNotFoundError()
    return notification


def mark_all_notifications_as_read(session: Session, recipient_id: int | None) -> int:
    """Apply :func:`mark_notification_as_read` to every currently unread row.

    The unread set is a snapshot: rows inserted while the loop runs stay
    unread. Individual failures are logged and skipped. Returns the number of
    notifications that were marked.
    """

    _require_recipient(recipient_id)
    unread_ids = NotificationRepository(session).list_unread_ids_for_user(recipient_id)

    marked = 0
    for notification_id in unread_ids:
        try:
            mark_notification_as_read(session, recipient_id, notification_id)
        except NotificationNotFoundError:
            # Deleted concurrently.
            continue
        except SQLAlchemyError:
            logger.exception(
                "No se pudo marcar como leída la notificación %s del usuario %s",
                notification_id,
                recipient_id,
            )
            continue
        marked += 1
    return marked


def delete_notification(
    session: Session, recipient_id: int | None, notification_id: int
) -> None:
    """Permanently remove an owned notification."""

    _require_recipient(recipient_id)
    repository = NotificationRepository(session)
    try:
        deleted = repository.delete(notification_id, user_id=recipient_id)
    except SQLAlchemyError:
        session.rollback()
        raise
    if not deleted:
        raise NotificationNotFoundError()


def _require_recipient(recipient_id: int | None) -> None:
    if not recipient_id:
        raise RecipientRequiredError()


__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
