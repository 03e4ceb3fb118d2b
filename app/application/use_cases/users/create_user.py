"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_CLIENT, User
from app.infrastructure.repositories import BarrioRepository, RoleRepository, UserRepository
from app.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = ROLE_CLIENT,
    barrio_id: int | None = None,
    must_change_password: bool = False,
) -> User:
    """Create a new user ensuring unique email addresses and a valid barrio."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        msg = "El correo electrónico ya está registrado"
        raise ValueError(msg)

    if barrio_id is not None and BarrioRepository(session).get(barrio_id) is None:
        raise ValueError("Barrio no encontrado")

    role = RoleRepository(session).get_or_create(role_alias)

    user = User(
        id=None,
        role=role,
        barrio_id=barrio_id,
        name=name,
        email=email,
        password=get_password_hash(password),
        must_change_password=must_change_password,
        last_login=None,
        created_at=None,
        updated_at=None,
        is_active=True,
    )

    return repository.create(user)
