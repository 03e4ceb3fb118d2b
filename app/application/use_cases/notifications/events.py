"""Compose notifications for administrative changes and hand them to the fan-out engine."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    COMPLAINT_STATUS_LABELS,
    NOTIFICATION_CATEGORY_ANNOUNCEMENT,
    NOTIFICATION_CATEGORY_COMPLAINT,
    NOTIFICATION_CATEGORY_COMPLAINT_STATUS,
    NOTIFICATION_CATEGORY_MAINTENANCE,
    NOTIFICATION_CATEGORY_NEWS,
    NOTIFICATION_CATEGORY_SCHEDULE,
    NOTIFICATION_CATEGORY_STATUS,
    ROLE_ADMIN,
    SERVICE_STATUS_ACTIVE,
    SERVICE_STATUS_INACTIVE,
    SERVICE_STATUS_INTERMITTENT,
    Barrio,
)
from app.utils import format_app_date

from .fan_out import notify_global, notify_neighborhood, notify_role, notify_user

_COMPLAINT_EXCERPT_LENGTH = 100

_SERVICE_STATUS_MESSAGES = {
    SERVICE_STATUS_ACTIVE: "¡Servicio de agua restaurado en {barrio}!",
    SERVICE_STATUS_INACTIVE: "Servicio de agua interrumpido en {barrio}",
    SERVICE_STATUS_INTERMITTENT: "Servicio de agua intermitente en {barrio}",
}


def notify_service_status_changed(session: Session, *, barrio: Barrio, status: str) -> int:
    """Tell the residents of ``barrio`` about a new water-service state."""

    template = _SERVICE_STATUS_MESSAGES.get(status)
    if template is None:
        message = f"Estado del servicio actualizado en {barrio.name}: {status}"
    else:
        message = template.format(barrio=barrio.name)
    return notify_neighborhood(session, barrio.id, message, NOTIFICATION_CATEGORY_STATUS)


def notify_announcement_published(session: Session, *, barrio: Barrio, message: str) -> int:
    """Forward an announcement to the residents of ``barrio``."""

    return notify_neighborhood(
        session,
        barrio.id,
        f"Aviso importante en {barrio.name}: {message}",
        NOTIFICATION_CATEGORY_ANNOUNCEMENT,
    )


def notify_maintenance_scheduled(
    session: Session,
    *,
    barrio: Barrio,
    start: datetime,
    end: datetime,
    description: str | None = None,
) -> int:
    """Announce a maintenance window to the residents of ``barrio``."""

    _validate_window(start, end)
    period = f"{format_app_date(start)} al {format_app_date(end)}"
    if description:
        message = f"Mantenimiento programado en {barrio.name}: {description} (Del {period})"
    else:
        message = f"Mantenimiento programado en {barrio.name} del {period}"
    return notify_neighborhood(session, barrio.id, message, NOTIFICATION_CATEGORY_MAINTENANCE)


def notify_schedule_published(
    session: Session,
    *,
    barrio: Barrio,
    start: datetime,
    end: datetime,
    description: str | None = None,
) -> int:
    """Announce a new water-supply schedule to the residents of ``barrio``."""

    _validate_window(start, end)
    if description:
        message = f"Nueva programación en {barrio.name}: {description}"
    else:
        message = (
            f"Nueva programación de agua en {barrio.name} del "
            f"{format_app_date(start)} al {format_app_date(end)}"
        )
    return notify_neighborhood(session, barrio.id, message, NOTIFICATION_CATEGORY_SCHEDULE)


def notify_news_published(session: Session, *, title: str) -> int:
    """Tell every user that a news item was published."""

    return notify_global(session, f"Nueva noticia: {title}", NOTIFICATION_CATEGORY_NEWS)


def notify_complaint_filed(
    session: Session,
    *,
    complainant: str,
    barrio: Barrio,
    message: str,
) -> int:
    """Notify each administrator about a complaint filed by a resident."""

    excerpt = message[:_COMPLAINT_EXCERPT_LENGTH]
    if len(message) > _COMPLAINT_EXCERPT_LENGTH:
        excerpt = f"{excerpt}..."
    text = f"Nueva queja de {complainant} ({barrio.name}): {excerpt}"

    return notify_role(session, ROLE_ADMIN, text, NOTIFICATION_CATEGORY_COMPLAINT)


def notify_complaint_status_changed(session: Session, *, user_id: int, status: str) -> int:
    """Tell the author of a complaint that its status changed."""

    label = COMPLAINT_STATUS_LABELS.get(status)
    if label is None:
        raise ValueError("Estado de queja no válido")
    return notify_user(
        session,
        user_id,
        f"Tu queja ha sido actualizada a: {label}",
        NOTIFICATION_CATEGORY_COMPLAINT_STATUS,
    )


def _validate_window(start: datetime, end: datetime) -> None:
    if end <= start:
        raise ValueError("La fecha de fin debe ser posterior a la fecha de inicio")


__all__ = [
    "notify_announcement_published",
    "notify_complaint_filed",
    "notify_complaint_status_changed",
    "notify_maintenance_scheduled",
    "notify_news_published",
    "notify_schedule_published",
    "notify_service_status_changed",
]
