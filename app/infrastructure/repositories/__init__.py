"""Repository implementations for infrastructure layer."""

from .audit_log_repository import AuditLogRepository
from .barrio_repository import BarrioRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository
from .notification_repository import NotificationRepository

__all__ = [
    "AuditLogRepository",
    "BarrioRepository",
    "RoleRepository",
    "UserRepository",
    "NotificationRepository",
]
