"""ORM models used by the application infrastructure."""

from .audit_log import AuditLogModel
from .barrio import BarrioModel
from .role import RoleModel
from .user import UserModel
from .notification import NotificationModel

__all__ = [
    "AuditLogModel",
    "BarrioModel",
    "RoleModel",
    "UserModel",
    "NotificationModel",
]
