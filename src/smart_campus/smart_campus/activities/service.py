from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..core.constants import DEFAULT_ACTIVITY_LIMIT
from .model import ActivityLog
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityService:
    """Use case: audit trail of mutating actions per institution."""

    def __init__(self, activities: ActivityRepository):
        self._activities = activities

    def record(
        self,
        *,
        institution_id: int,
        user_id: int,
        action: str,
        description: str,
        metadata: Optional[dict[str, Any]] = None,
    ) -> int:
        activity_id = self._activities.append(
            institution_id=int(institution_id),
            user_id=int(user_id),
            action=action,
            description=description,
            metadata=metadata or {},
        )
        logger.info("activity %s institution=%s user=%s", action, institution_id, user_id)
        return activity_id

    def recent(self, institution_id: int, *, limit: int = DEFAULT_ACTIVITY_LIMIT) -> Sequence[ActivityLog]:
        return self._activities.list_recent(int(institution_id), limit=int(limit))
