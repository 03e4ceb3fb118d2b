"""Shared fixtures: every test runs against a fresh file-backed SQLite database."""

from __future__ import annotations

import itertools
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "water_board_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "America/Bogota"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.application.use_cases.barrios import create_barrio  # noqa: E402
from app.domain.entities import ROLE_CLIENT  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.models import UserModel  # noqa: E402
from app.infrastructure.repositories import RoleRepository  # noqa: E402
from app.infrastructure.security import get_password_hash  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def make_barrio(session):
    """Return a factory that stores a barrio and returns the entity."""

    def _make(name: str):
        return create_barrio(session, name=name)

    return _make


@pytest.fixture()
def make_user(session):
    """Return a factory that stores a user and returns its id.

    Passwords are only hashed when given; hashing is slow and most tests never
    log in.
    """

    counter = itertools.count(1)

    def _make(
        *,
        barrio_id: int | None = None,
        role: str = ROLE_CLIENT,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        is_active: bool = True,
    ) -> int:
        index = next(counter)
        role_entity = RoleRepository(session).get_or_create(role)
        model = UserModel(
            role_id=role_entity.id,
            barrio_id=barrio_id,
            name=name or f"Usuario {index}",
            email=email or f"usuario{index}@example.com",
            password=get_password_hash(password) if password else "sin-clave",
            must_change_password=False,
            is_active=is_active,
        )
        session.add(model)
        session.commit()
        session.refresh(model)
        return model.id

    return _make
