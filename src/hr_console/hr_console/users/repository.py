from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for console accounts and their roles.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        role: Role,
    ) -> int:
        raise NotImplementedError

    def list_roles(self, user_id: int) -> Sequence[Role]:
        raise NotImplementedError
