"""Domain entities representing user notifications."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

NOTIFICATION_CATEGORY_GENERAL = "general"
NOTIFICATION_CATEGORY_ANNOUNCEMENT = "announcement"
NOTIFICATION_CATEGORY_STATUS = "status"
NOTIFICATION_CATEGORY_SCHEDULE = "schedule"
NOTIFICATION_CATEGORY_MAINTENANCE = "maintenance"
NOTIFICATION_CATEGORY_NEWS = "news"
NOTIFICATION_CATEGORY_COMPLAINT = "complaint"
NOTIFICATION_CATEGORY_COMPLAINT_STATUS = "complaint-status"


@dataclass
class Notification:
    """Message delivered to exactly one recipient.

    Only ``is_read`` (and its companion ``read_at``) may change after creation,
    and only from ``False`` to ``True``.
    """

    id: int | None
    recipient_id: int
    message: str
    category: str = NOTIFICATION_CATEGORY_GENERAL
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


@dataclass
class NotificationPage:
    """A page of a recipient's notifications plus the derived counters."""

    page: int
    page_size: int
    total: int
    unread_count: int
    items: list[Notification] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


__all__ = [
    "NOTIFICATION_CATEGORY_GENERAL",
    "NOTIFICATION_CATEGORY_ANNOUNCEMENT",
    "NOTIFICATION_CATEGORY_STATUS",
    "NOTIFICATION_CATEGORY_SCHEDULE",
    "NOTIFICATION_CATEGORY_MAINTENANCE",
    "NOTIFICATION_CATEGORY_NEWS",
    "NOTIFICATION_CATEGORY_COMPLAINT",
    "NOTIFICATION_CATEGORY_COMPLAINT_STATUS",
    "Notification",
    "NotificationPage",
]
