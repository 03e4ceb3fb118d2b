"""Fan-out engine: resolve an audience and write one notification per recipient."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import NOTIFICATION_CATEGORY_GENERAL, Notification
from app.infrastructure.repositories import NotificationRepository, UserRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def notify_user(
    session: Session,
    user_id: int,
    message: str,
    category: str = NOTIFICATION_CATEGORY_GENERAL,
) -> int:
    """Create a single notification for ``user_id``.

    Storage failures are rolled back and re-raised: a single-target delivery is
    reported to the caller instead of being skipped.
    """

    notification = Notification(
        id=None,
        recipient_id=user_id,
        message=message,
        category=category or NOTIFICATION_CATEGORY_GENERAL,
        created_at=now_in_app_timezone(),
    )
    try:
        NotificationRepository(session).create(notification)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error creando notificación individual para usuario %s", user_id)
        raise

    logger.info("Notificación creada para usuario %s", user_id)
    return 1


def notify_neighborhood(
    session: Session,
    barrio_id: int,
    message: str,
    category: str = NOTIFICATION_CATEGORY_GENERAL,
) -> int:
    """Notify every user assigned to ``barrio_id`` at call time.

    Returns the number of notifications actually stored. An empty barrio is
    not an error and performs no writes.
    """

    recipients = UserRepository(session).list_ids_by_barrio(barrio_id)
    return _fan_out(
        session,
        recipients,
        message=message,
        category=category,
        audience=f"barrio {barrio_id}",
    )


def notify_global(
    session: Session,
    message: str,
    category: str = NOTIFICATION_CATEGORY_GENERAL,
) -> int:
    """Notify every user registered in the system at call time."""

    recipients = UserRepository(session).list_ids()
    return _fan_out(
        session,
        recipients,
        message=message,
        category=category,
        audience="global",
    )


def notify_role(
    session: Session,
    role_alias: str,
    message: str,
    category: str = NOTIFICATION_CATEGORY_GENERAL,
) -> int:
    """Notify every user holding ``role_alias`` at call time."""

    recipients = UserRepository(session).list_ids_by_role_alias(role_alias)
    return _fan_out(
        session,
        recipients,
        message=message,
        category=category,
        audience=f"rol {role_alias}",
    )


def _fan_out(
    session: Session,
    recipient_ids: Iterable[int],
    *,
    message: str,
    category: str,
    audience: str,
) -> int:
    unique_ids = list(dict.fromkeys(recipient_id for recipient_id in recipient_ids if recipient_id))
    if not unique_ids:
        logger.info("Sin destinatarios para notificación (%s)", audience)
        return 0

    created, failed = NotificationRepository(session).create_many(
        unique_ids,
        message=message,
        category=category or NOTIFICATION_CATEGORY_GENERAL,
    )
    for recipient_id in failed:
        logger.error(
            "No se pudo crear la notificación para usuario %s (%s); se omite",
            recipient_id,
            audience,
        )

    logger.info(
        "Notificaciones creadas: %s de %s para %s",
        len(created),
        len(unique_ids),
        audience,
    )
    return len(created)


__all__ = ["notify_global", "notify_neighborhood", "notify_role", "notify_user"]
