"""Administrator-issued notifications with an explicitly chosen audience."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.audit_logs import record_audit_log
from app.domain.entities import NOTIFICATION_CATEGORY_GENERAL
from app.infrastructure.repositories import BarrioRepository, UserRepository

from .errors import AudienceNotFoundError
from .fan_out import notify_global, notify_neighborhood, notify_user

logger = logging.getLogger(__name__)

_AUDIT_EXCERPT_LENGTH = 50


def dispatch_admin_notification(
    session: Session,
    *,
    admin_id: int,
    message: str,
    category: str | None = None,
    barrio_id: int | None = None,
    user_id: int | None = None,
    is_global: bool = False,
) -> int:
    """Send ``message`` to all users, one barrio or one user and audit the action.

    When several targets are given, global wins over barrio, and barrio wins
    over a single user. Returns the number of notifications created.
    """

    message = (message or "").strip()
    if not message:
        raise ValueError("Mensaje es requerido")
    category = category or NOTIFICATION_CATEGORY_GENERAL

    if is_global:
        created = notify_global(session, message, category)
    elif barrio_id is not None:
        if BarrioRepository(session).get(barrio_id) is None:
            raise AudienceNotFoundError("Barrio no encontrado")
        created = notify_neighborhood(session, barrio_id, message, category)
    elif user_id is not None:
        if UserRepository(session).get(user_id) is None:
            raise AudienceNotFoundError("Usuario no encontrado")
        created = notify_user(session, user_id, message, category)
    else:
        raise ValueError("Debe especificar barrio_id, user_id o marcar como global")

    record_audit_log(
        session,
        action=(
            f"Notificaciones enviadas: {created} notificaciones - "
            f"{message[:_AUDIT_EXCERPT_LENGTH]}..."
        ),
        user_id=admin_id,
    )
    logger.info("Administrador %s envió %s notificaciones", admin_id, created)
    return created


__all__ = ["dispatch_admin_notification"]
