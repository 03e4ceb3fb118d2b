"""Endpoints for listing, reading and dispatching notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    AudienceNotFoundError,
    NotificationNotFoundError,
    RecipientRequiredError,
    count_unread_notifications,
    delete_notification as delete_notification_uc,
    dispatch_admin_notification,
    list_notifications as list_notifications_uc,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from app.config import get_settings
from app.domain.entities import Notification, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_admin
from app.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationDispatchRequest,
    NotificationDispatchResponse,
    NotificationListResponse,
    NotificationPagination,
    NotificationRead,
    UnreadCountResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
settings = get_settings()


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _unauthorized(exc: RecipientRequiredError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=str(exc),
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.get("/", response_model=NotificationListResponse)
def list_notifications(
    page: int = Query(1, ge=1),
    page_size: int = Query(
        settings.notifications_page_size,
        ge=1,
        le=settings.notifications_max_page_size,
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Devuelve las notificaciones del usuario autenticado, de la más reciente a la más antigua."""

    try:
        result = list_notifications_uc(db, current_user.id, page=page, page_size=page_size)
    except RecipientRequiredError as exc:
        raise _unauthorized(exc) from exc

    return NotificationListResponse(
        items=[_notification_to_schema(notification) for notification in result.items],
        pagination=NotificationPagination(
            page=result.page,
            page_size=result.page_size,
            total=result.total,
            unread_count=result.unread_count,
            total_pages=result.total_pages,
        ),
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountResponse:
    """Cantidad de notificaciones sin leer, usada por el indicador de la barra."""

    try:
        unread = count_unread_notifications(db, current_user.id)
    except RecipientRequiredError as exc:
        raise _unauthorized(exc) from exc
    return UnreadCountResponse(unread_count=unread)


@router.post("/read-all", response_model=MarkAllReadResponse)
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    """Marca como leídas todas las notificaciones pendientes del usuario."""

    try:
        updated = mark_all_notifications_as_read(db, current_user.id)
    except RecipientRequiredError as exc:
        raise _unauthorized(exc) from exc
    return MarkAllReadResponse(updated=updated)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Marca una notificación propia como leída. Repetir la operación no es un error."""

    try:
        notification = mark_notification_as_read(db, current_user.id, notification_id)
    except RecipientRequiredError as exc:
        raise _unauthorized(exc) from exc
    except NotificationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Elimina definitivamente una notificación propia."""

    try:
        delete_notification_uc(db, current_user.id, notification_id)
    except RecipientRequiredError as exc:
        raise _unauthorized(exc) from exc
    except NotificationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/",
    response_model=NotificationDispatchResponse,
    status_code=status.HTTP_201_CREATED,
)
def send_notification(
    payload: NotificationDispatchRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> NotificationDispatchResponse:
    """Envía una notificación a todos los usuarios, a un barrio o a un usuario."""

    try:
        created = dispatch_admin_notification(
            db,
            admin_id=current_user.id,
            message=payload.message,
            category=payload.category,
            barrio_id=payload.barrio_id,
            user_id=payload.user_id,
            is_global=payload.is_global,
        )
    except AudienceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return NotificationDispatchResponse(
        success=True,
        message="Notificaciones creadas exitosamente",
        created_count=created,
    )
