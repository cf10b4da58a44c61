from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClassroomCreate(_Schema):
    room_number: str = Field(..., min_length=1, max_length=50)
    institution_id: int
    capacity: int = Field(..., ge=0)
    building: Optional[str] = Field(None, max_length=255)
    equipment: Optional[List[str]] = None
    room_type: str = Field("lecture", max_length=50)


class TimeSlotCreate(_Schema):
    institution_id: int
    day: str = Field(..., min_length=1, max_length=20)
    start_time: str = Field(..., min_length=1, max_length=10)
    end_time: str = Field(..., min_length=1, max_length=10)
    duration: int = Field(..., gt=0)


class TimetableSlotCreate(_Schema):
    # Classroom/lecturer double bookings are accepted.
    institution_id: int
    course_id: int
    classroom_id: int
    time_slot_id: int
    lecturer_id: int
    academic_year: str = Field(..., min_length=1, max_length=20)
    semester: str = Field(..., min_length=1, max_length=20)
    student_groups: Optional[List[str]] = None
    efficiency_score: Decimal = Field(Decimal("0.85"), max_digits=3, decimal_places=2)
    weather_factor: Decimal = Field(Decimal("1.00"), max_digits=3, decimal_places=2)
