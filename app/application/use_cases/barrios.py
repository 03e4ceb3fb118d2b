"""Use cases for neighborhoods."""

from sqlalchemy.orm import Session

from app.domain.entities import Barrio
from app.infrastructure.repositories import BarrioRepository


def create_barrio(session: Session, *, name: str) -> Barrio:
    """Register a new barrio with a unique, non-empty name."""

    name = (name or "").strip()
    if not name:
        raise ValueError("El nombre del barrio es requerido")

    repository = BarrioRepository(session)
    if repository.get_by_name(name) is not None:
        raise ValueError("Ya existe un barrio con ese nombre")
    return repository.create(Barrio(id=None, name=name))


def get_or_create_barrio(session: Session, *, name: str) -> Barrio:
    """Return the barrio called ``name``, creating it when missing."""

    existing = BarrioRepository(session).get_by_name(name)
    if existing is not None:
        return existing
    return create_barrio(session, name=name)


__all__ = ["create_barrio", "get_or_create_barrio"]
