from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class ApiIntegration:
    """Configuration record for an external system (SIS, LMS, biometric reader...).

    Only the settings are stored here; nothing calls the endpoint.
    """

    id: int
    institution_id: int
    name: str
    type: str
    endpoint: str
    api_key: Optional[str] = None
    configuration: Optional[Any] = None
    is_active: bool = True
    last_sync: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
