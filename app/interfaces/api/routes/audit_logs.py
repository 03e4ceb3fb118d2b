"""Endpoints exposing the administrative audit log."""

import math

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.audit_logs import list_audit_logs as list_audit_logs_uc
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_admin
from app.interfaces.api.schemas import (
    AuditLogListResponse,
    AuditLogPagination,
    AuditLogRead,
)

router = APIRouter(prefix="/audit-logs", tags=["audit-logs"])


@router.get("/", response_model=AuditLogListResponse)
def list_audit_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> AuditLogListResponse:
    """Devuelve el registro de acciones administrativas, del más reciente al más antiguo."""

    entries, total = list_audit_logs_uc(db, page=page, page_size=page_size)
    return AuditLogListResponse(
        items=[AuditLogRead.model_validate(entry) for entry in entries],
        pagination=AuditLogPagination(
            page=page,
            page_size=page_size,
            total=total,
            total_pages=math.ceil(total / page_size),
        ),
    )
