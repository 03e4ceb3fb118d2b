"""Persistence layer for roles data."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import DEFAULT_ROLE_NAMES, Role
from app.infrastructure.models import RoleModel


class RoleRepository:
    """Provide access to the admin / client roles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, role_id: int) -> Role | None:
        model = self.session.get(RoleModel, role_id)
        return self._to_entity(model) if model else None

    def get_by_alias(self, alias: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.alias) == alias.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_or_create(self, alias: str) -> Role:
        """Return the role identified by ``alias``, seeding it when missing."""

        existing = self.get_by_alias(alias)
        if existing is not None:
            return existing

        normalized = alias.lower()
        if normalized not in DEFAULT_ROLE_NAMES:
            raise ValueError("Rol no permitido")

        model = RoleModel(name=DEFAULT_ROLE_NAMES[normalized], alias=normalized)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name, alias=model.alias)


__all__ = ["RoleRepository"]
