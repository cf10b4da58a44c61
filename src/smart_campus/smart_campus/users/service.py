from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..activities.service import ActivityService
from ..common.validators import require_mapping, require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use cases: list users of an institution, change a user's role."""

    def __init__(self, users: UserRepository, activities: ActivityService):
        self._users = users
        self._activities = activities

    def list_for_institution(self, institution_id: int, *, role: Optional[str] = None) -> Sequence[User]:
        role = (role or "").strip() or None
        return self._users.list_by_institution(int(institution_id), role=role)

    def update_role(self, *, actor: User, user_id: int, payload: Any) -> User:
        data = require_mapping(payload)
        role = require_non_empty(data.get("role", ""), "role")

        permissions = data.get("permissions")
        if permissions is not None:
            if not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions):
                raise ValidationError("permissions must be a list of strings", {"permissions": "list of strings"})

        if not Role.is_known(role):
            logger.warning("assigning non-standard role %r to user %s", role, user_id)

        if not self._users.update_role(int(user_id), role=role, permissions=permissions):
            raise NotFoundError("User not found")

        user = self._users.get_by_id(int(user_id))
        if user is None:
            raise NotFoundError("User not found")

        logger.info("user %s role set to %s by user %s", user.id, role, actor.id)
        if user.institution_id:
            self._activities.record(
                institution_id=user.institution_id,
                user_id=actor.id,
                action="user_role_updated",
                description=f"User {user.username} role updated to {role}",
                metadata={"targetUserId": user.id, "role": role, "permissions": permissions},
            )
        return user
