from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.enums import AttendanceStatus


class AttendanceRecordCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    student_id: int = Field(..., ge=1)
    institution_id: int
    date: dt.date
    status: AttendanceStatus = AttendanceStatus.PRESENT.value
    check_in_time: Optional[str] = Field(None, max_length=10)
    check_out_time: Optional[str] = Field(None, max_length=10)
    biometric_id: Optional[str] = Field(None, max_length=100)
    device_id: Optional[str] = Field(None, max_length=100)
    metadata: Optional[Any] = None
