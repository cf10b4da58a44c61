from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import ActivityLog


class ActivityRepository(Protocol):
    """Append-only: there is deliberately no update or delete."""

    def append(
        self,
        *,
        institution_id: int,
        user_id: int,
        action: str,
        description: str,
        metadata: Optional[dict[str, Any]] = None,
    ) -> int:
        raise NotImplementedError

    def list_recent(self, institution_id: int, *, limit: int) -> Sequence[ActivityLog]:
        """Newest first."""

        raise NotImplementedError
