"""Persistence layer for neighborhoods."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Barrio
from app.infrastructure.models import BarrioModel


class BarrioRepository:
    """Provide CRUD helpers for :class:`Barrio` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, barrio_id: int) -> Barrio | None:
        model = self.session.get(BarrioModel, barrio_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Barrio | None:
        model = (
            self.session.query(BarrioModel)
            .filter(func.lower(BarrioModel.name) == name.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, barrio: Barrio) -> Barrio:
        model = BarrioModel(name=barrio.name.strip())
        if barrio.created_at is not None:
            model.created_at = barrio.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: BarrioModel) -> Barrio:
        return Barrio(id=model.id, name=model.name, created_at=model.created_at)


__all__ = ["BarrioRepository"]
