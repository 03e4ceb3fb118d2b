"""Public helpers for emitting and reading notifications."""

from .dispatch import dispatch_admin_notification
from .errors import (
    AudienceNotFoundError,
    NotificationNotFoundError,
    RecipientRequiredError,
)
from .events import (
    notify_announcement_published,
    notify_complaint_filed,
    notify_complaint_status_changed,
    notify_maintenance_scheduled,
    notify_news_published,
    notify_schedule_published,
    notify_service_status_changed,
)
from .fan_out import notify_global, notify_neighborhood, notify_role, notify_user
from .read_state import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)

__all__ = [
    "dispatch_admin_notification",
    "AudienceNotFoundError",
    "NotificationNotFoundError",
    "RecipientRequiredError",
    "notify_announcement_published",
    "notify_complaint_filed",
    "notify_complaint_status_changed",
    "notify_maintenance_scheduled",
    "notify_news_published",
    "notify_schedule_published",
    "notify_service_status_changed",
    "notify_global",
    "notify_neighborhood",
    "notify_role",
    "notify_user",
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
