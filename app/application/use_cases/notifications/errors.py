"""Errors raised by the notification use cases."""


class NotificationNotFoundError(ValueError):
    """The notification does not exist or belongs to another user.

    Both cases share one error so callers cannot probe for other users' rows.
    """

    def __init__(self, message: str = "Notificación no encontrada") -> None:
        super().__init__(message)


class AudienceNotFoundError(ValueError):
    """The barrio or user targeted by a dispatch does not exist."""


class RecipientRequiredError(PermissionError):
    """A read-state operation was attempted without an authenticated recipient."""

    def __init__(self, message: str = "No autorizado") -> None:
        super().__init__(message)


__all__ = [
    "AudienceNotFoundError",
    "NotificationNotFoundError",
    "RecipientRequiredError",
]
