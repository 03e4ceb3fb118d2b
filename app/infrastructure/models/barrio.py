"""SQLAlchemy model for neighborhoods."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class BarrioModel(Base):
    """Database representation of a water-service neighborhood."""

    __tablename__ = "barrio"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    users = relationship("UserModel", back_populates="barrio")


__all__ = ["BarrioModel"]
