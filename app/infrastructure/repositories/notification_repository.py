"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import NOTIFICATION_CATEGORY_GENERAL, Notification
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Store of per-recipient notification rows.

    Every mutating method is scoped by ``user_id`` so a caller can never touch a
    row owned by somebody else.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def create_many(
        self,
        recipient_ids: Iterable[int],
        *,
        message: str,
        category: str = NOTIFICATION_CATEGORY_GENERAL,
    ) -> tuple[list[Notification], list[int]]:
        """Insert one row per recipient, committing each insert on its own.

        Returns the created notifications together with the recipients whose
        insert failed; a failure is rolled back and does not stop the batch.
        """

        created: list[Notification] = []
        failed: list[int] = []
        for recipient_id in recipient_ids:
            notification = Notification(
                id=None,
                recipient_id=recipient_id,
                message=message,
                category=category,
            )
            try:
                created.append(self.create(notification))
            except SQLAlchemyError:
                self.session.rollback()
                failed.append(recipient_id)
        return created, failed

    def list_for_user(
        self,
        user_id: int,
        *,
        offset: int = 0,
        limit: int | None = 20,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_for_user(self, user_id: int, *, unread_only: bool = False) -> int:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        return query.count()

    def list_unread_ids_for_user(self, user_id: int) -> list[int]:
        query = (
            self.session.query(NotificationModel.id)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .order_by(NotificationModel.id)
        )
        return [notification_id for (notification_id,) in query.all()]

    def get_for_user(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = self._get_owned_model(notification_id, user_id=user_id)
        return self._to_entity(model) if model else None

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        """Flip ``is_read`` for an owned, unread row and return the stored state.

        The ownership check is part of the ``UPDATE`` itself. Already read rows
        are left untouched, which makes the call idempotent. ``None`` means the
        row does not exist or belongs to another user.
        """

        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id,
            NotificationModel.user_id == user_id,
            NotificationModel.is_read.is_(False),
        ).update(
            {
                NotificationModel.is_read: True,
                NotificationModel.read_at: ensure_app_naive_datetime(
                    now_in_app_timezone()
                ),
            },
            synchronize_session=False,
        )
        self.session.commit()
        return self.get_for_user(notification_id, user_id=user_id)

    def delete(self, notification_id: int, *, user_id: int) -> bool:
        """Delete an owned notification.

        Returns ``True`` when a row was removed and ``False`` when nothing
        matched the ``(id, user_id)`` pair.
        """

        deleted = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted > 0

    def _get_owned_model(
        self, notification_id: int, *, user_id: int
    ) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.user_id = notification.recipient_id
        model.message = notification.message
        model.category = notification.category or NOTIFICATION_CATEGORY_GENERAL
        model.is_read = bool(notification.is_read)
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        model.read_at = ensure_app_naive_datetime(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.user_id,
            message=model.message,
            category=model.category,
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
