from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Classroom:
    id: int
    room_number: str
    institution_id: int
    capacity: int
    building: Optional[str] = None
    equipment: Optional[list[str]] = None
    room_type: str = "lecture"
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class TimeSlot:
    """A recurring weekly period, e.g. Monday 09:00-10:00 (times kept as HH:MM text)."""

    id: int
    institution_id: int
    day: str
    start_time: str
    end_time: str
    duration: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class TimetableSlot:
    """A course placed in a classroom at a time slot with a lecturer.

    Nothing prevents two slots from sharing a classroom or lecturer at the
    same time slot.
    """

    id: int
    institution_id: int
    course_id: int
    classroom_id: int
    time_slot_id: int
    lecturer_id: int
    academic_year: str
    semester: str
    student_groups: Optional[list[str]] = None
    efficiency_score: Optional[Decimal] = None
    weather_factor: Optional[Decimal] = None
    created_at: Optional[datetime] = None
