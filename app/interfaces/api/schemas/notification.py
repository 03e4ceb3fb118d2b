"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    recipient_id: int
    message: str
    category: str
    is_read: bool
    created_at: datetime
    read_at: datetime | None = None


class NotificationPagination(BaseModel):
    page: int
    page_size: int
    total: int
    unread_count: int
    total_pages: int


class NotificationListResponse(BaseModel):
    """Page of notifications together with the recipient's counters."""

    items: list[NotificationRead]
    pagination: NotificationPagination


class UnreadCountResponse(BaseModel):
    unread_count: int


class MarkAllReadResponse(BaseModel):
    updated: int = Field(..., description="Notificaciones marcadas como leídas")


class NotificationDispatchRequest(BaseModel):
    """Payload used by administrators to send a notification."""

    model_config = ConfigDict(extra="forbid")

    message: str = Field(..., min_length=1, description="Texto de la notificación")
    category: str = Field(default="general", min_length=1, max_length=30)
    barrio_id: int | None = Field(default=None, ge=1)
    user_id: int | None = Field(default=None, ge=1)
    is_global: bool = False


class NotificationDispatchResponse(BaseModel):
    success: bool
    message: str
    created_count: int


__all__ = [
    "MarkAllReadResponse",
    "NotificationDispatchRequest",
    "NotificationDispatchResponse",
    "NotificationListResponse",
    "NotificationPagination",
    "NotificationRead",
    "UnreadCountResponse",
]
