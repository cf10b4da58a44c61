from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Institution:
    """Domain entity: the tenant that owns every other domain row."""

    id: int
    name: str
    type: str
    education_system: str
    location: Optional[str] = None
    size: Optional[str] = None
    academic_calendar: Optional[Any] = None
    structure: Optional[Any] = None
    is_configured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class InstitutionStats:
    """Dashboard read-model. Only ``classroom_usage`` is derived."""

    total_students: int
    active_courses: int
    faculty_members: int
    classroom_usage: int
