from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, username: str, email: str, password_hash: str, role: str) -> int:
        raise NotImplementedError

    def set_institution(self, user_id: int, *, institution_id: int) -> bool:
        raise NotImplementedError

    def update_role(self, user_id: int, *, role: str, permissions: Optional[list[str]] = None) -> bool:
        """Overwrite role; permissions are only replaced when given."""

        raise NotImplementedError

    def list_by_institution(self, institution_id: int, *, role: Optional[str] = None) -> Sequence[User]:
        raise NotImplementedError
