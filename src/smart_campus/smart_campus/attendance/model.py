from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in event of a student on a given date.

    ``student_id`` references ``students.id`` (the row id, not the public number).
    """

    id: int
    student_id: int
    institution_id: int
    date: date
    status: str
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    biometric_id: Optional[str] = None
    device_id: Optional[str] = None
    metadata: Optional[Any] = None
    created_at: Optional[datetime] = None
