"""Persistence layer for audit log records."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AuditLog
from app.infrastructure.models import AuditLogModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class AuditLogRepository:
    """Provide create and paginated read helpers for :class:`AuditLog` entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: AuditLog) -> AuditLog:
        model = AuditLogModel(
            action=entry.action,
            user_id=entry.user_id,
            created_at=ensure_app_naive_datetime(
                entry.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list(self, *, offset: int = 0, limit: int = 50) -> Sequence[AuditLog]:
        """Return audit entries, newest first."""

        query = (
            self.session.query(AuditLogModel)
            .order_by(AuditLogModel.created_at.desc(), AuditLogModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def count(self) -> int:
        return self.session.query(AuditLogModel).count()

    @staticmethod
    def _to_entity(model: AuditLogModel) -> AuditLog:
        return AuditLog(
            id=model.id,
            action=model.action,
            user_id=model.user_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["AuditLogRepository"]
