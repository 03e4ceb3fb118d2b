"""Domain entity representing a neighborhood (barrio)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Barrio:
    """Administrative grouping of users sharing one water-service zone."""

    id: int | None
    name: str
    created_at: datetime | None = None


__all__ = ["Barrio"]
