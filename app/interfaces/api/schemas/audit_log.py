"""Schemas for audit log endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AuditLogRead(BaseModel):
    """Representation of an audit log entry returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    action: str
    user_id: int | None
    created_at: datetime | None


class AuditLogPagination(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int


class AuditLogListResponse(BaseModel):
    items: list[AuditLogRead]
    pagination: AuditLogPagination


__all__ = ["AuditLogListResponse", "AuditLogPagination", "AuditLogRead"]
