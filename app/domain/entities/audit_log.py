"""Domain entity representing an administrative audit entry."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class AuditLog:
    """Record of an action performed by a user, e.g. a notification dispatch."""

    id: int | None
    action: str
    user_id: int | None
    created_at: datetime | None


__all__ = ["AuditLog"]
