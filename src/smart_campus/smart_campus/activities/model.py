from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class ActivityLog:
    """Domain entity: one append-only audit entry."""

    id: int
    institution_id: int
    user_id: int
    action: str
    description: str
    metadata: Optional[dict[str, Any]]
    created_at: Optional[datetime] = None
