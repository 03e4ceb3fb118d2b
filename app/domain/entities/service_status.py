"""Water-service and complaint states published by administrators."""

from typing import Final

SERVICE_STATUS_ACTIVE: Final[str] = "Activo"
SERVICE_STATUS_INACTIVE: Final[str] = "Inactivo"
SERVICE_STATUS_INTERMITTENT: Final[str] = "Intermitente"

SERVICE_STATUSES: Final[tuple[str, ...]] = (
    SERVICE_STATUS_ACTIVE,
    SERVICE_STATUS_INACTIVE,
    SERVICE_STATUS_INTERMITTENT,
)

COMPLAINT_STATUS_PENDING: Final[str] = "pendiente"
COMPLAINT_STATUS_IN_PROGRESS: Final[str] = "en_proceso"
COMPLAINT_STATUS_RESOLVED: Final[str] = "resuelta"

COMPLAINT_STATUS_LABELS: Final[dict[str, str]] = {
    COMPLAINT_STATUS_PENDING: "Pendiente",
    COMPLAINT_STATUS_IN_PROGRESS: "En Proceso",
    COMPLAINT_STATUS_RESOLVED: "Resuelta",
}

__all__ = [
    "SERVICE_STATUS_ACTIVE",
    "SERVICE_STATUS_INACTIVE",
    "SERVICE_STATUS_INTERMITTENT",
    "SERVICE_STATUSES",
    "COMPLAINT_STATUS_PENDING",
    "COMPLAINT_STATUS_IN_PROGRESS",
    "COMPLAINT_STATUS_RESOLVED",
    "COMPLAINT_STATUS_LABELS",
]
