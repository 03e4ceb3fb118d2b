"""Domain entities exposed by the application."""

from .audit_log import AuditLog
from .barrio import Barrio
from .notification import (
    NOTIFICATION_CATEGORY_ANNOUNCEMENT,
    NOTIFICATION_CATEGORY_COMPLAINT,
    NOTIFICATION_CATEGORY_COMPLAINT_STATUS,
    NOTIFICATION_CATEGORY_GENERAL,
    NOTIFICATION_CATEGORY_MAINTENANCE,
    NOTIFICATION_CATEGORY_NEWS,
    NOTIFICATION_CATEGORY_SCHEDULE,
    NOTIFICATION_CATEGORY_STATUS,
    Notification,
    NotificationPage,
)
from .role import DEFAULT_ROLE_NAMES, ROLE_ADMIN, ROLE_CLIENT, Role
from .service_status import (
    COMPLAINT_STATUS_IN_PROGRESS,
    COMPLAINT_STATUS_LABELS,
    COMPLAINT_STATUS_PENDING,
    COMPLAINT_STATUS_RESOLVED,
    SERVICE_STATUS_ACTIVE,
    SERVICE_STATUS_INACTIVE,
    SERVICE_STATUS_INTERMITTENT,
    SERVICE_STATUSES,
)
from .user import User

__all__ = [
    "AuditLog",
    "Barrio",
    "NOTIFICATION_CATEGORY_ANNOUNCEMENT",
    "NOTIFICATION_CATEGORY_COMPLAINT",
    "NOTIFICATION_CATEGORY_COMPLAINT_STATUS",
    "NOTIFICATION_CATEGORY_GENERAL",
    "NOTIFICATION_CATEGORY_MAINTENANCE",
    "NOTIFICATION_CATEGORY_NEWS",
    "NOTIFICATION_CATEGORY_SCHEDULE",
    "NOTIFICATION_CATEGORY_STATUS",
    "Notification",
    "NotificationPage",
    "DEFAULT_ROLE_NAMES",
    "ROLE_ADMIN",
    "ROLE_CLIENT",
    "Role",
    "COMPLAINT_STATUS_IN_PROGRESS",
    "COMPLAINT_STATUS_LABELS",
    "COMPLAINT_STATUS_PENDING",
    "COMPLAINT_STATUS_RESOLVED",
    "SERVICE_STATUS_ACTIVE",
    "SERVICE_STATUS_INACTIVE",
    "SERVICE_STATUS_INTERMITTENT",
    "SERVICE_STATUSES",
    "User",
]
