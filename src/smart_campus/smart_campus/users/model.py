from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object. ``role`` is an open string; see ``core.enums.Role``
    for the recommended values.
    """

    id: int
    username: str
    email: str
    password_hash: str
    role: str
    institution_id: Optional[int]
    permissions: Optional[list[str]] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def public_view(self) -> dict:
        """What the API returns for a user (never the password hash)."""

        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "institutionId": self.institution_id,
            "permissions": list(self.permissions) if self.permissions is not None else None,
        }
