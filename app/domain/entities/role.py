"""Domain entity representing a user role."""

from dataclasses import dataclass

ROLE_ADMIN = "admin"
ROLE_CLIENT = "client"

DEFAULT_ROLE_NAMES = {
    ROLE_ADMIN: "Administrador",
    ROLE_CLIENT: "Cliente",
}


@dataclass
class Role:
    """Role assigned to a user; only administrators may publish changes."""

    id: int
    name: str
    alias: str


__all__ = ["DEFAULT_ROLE_NAMES", "ROLE_ADMIN", "ROLE_CLIENT", "Role"]
