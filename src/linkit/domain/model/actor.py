"""The already-authenticated caller of a use case."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from linkit.domain.exceptions import UnauthorizedError


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor:
    id: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def require_admin(self) -> None:
        if not self.is_admin:
            raise UnauthorizedError("This action is restricted to administrators")

    def owns(self, created_by: str | None) -> bool:
        return created_by is not None and created_by == self.id
