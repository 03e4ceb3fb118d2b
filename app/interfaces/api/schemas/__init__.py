from .audit_log import AuditLogListResponse, AuditLogPagination, AuditLogRead
from .auth import Token
from .notification import (
    MarkAllReadResponse,
    NotificationDispatchRequest,
    NotificationDispatchResponse,
    NotificationListResponse,
    NotificationPagination,
    NotificationRead,
    UnreadCountResponse,
)

__all__ = [
    "AuditLogListResponse",
    "AuditLogPagination",
    "AuditLogRead",
    "Token",
    "MarkAllReadResponse",
    "NotificationDispatchRequest",
    "NotificationDispatchResponse",
    "NotificationListResponse",
    "NotificationPagination",
    "NotificationRead",
    "UnreadCountResponse",
]
