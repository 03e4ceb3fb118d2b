"""Use cases for recording and reading audit log entries."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import AuditLog
from app.infrastructure.repositories import AuditLogRepository
from app.utils import now_in_app_timezone

_MAX_ACTION_LENGTH = 255


def record_audit_log(session: Session, *, action: str, user_id: int | None) -> AuditLog:
    """Persist an audit entry describing ``action``."""

    entry = AuditLog(
        id=None,
        action=action[:_MAX_ACTION_LENGTH],
        user_id=user_id,
        created_at=now_in_app_timezone(),
    )
    return AuditLogRepository(session).create(entry)


def list_audit_logs(
    session: Session, *, page: int = 1, page_size: int = 50
) -> tuple[Sequence[AuditLog], int]:
    """Return one page of audit entries (newest first) and the total count."""

    if page < 1 or page_size < 1:
        raise ValueError("Parámetros de paginación inválidos")
    repository = AuditLogRepository(session)
    entries = repository.list(offset=(page - 1) * page_size, limit=page_size)
    return entries, repository.count()


__all__ = [
    "list_audit_logs",
    "record_audit_log",
]
