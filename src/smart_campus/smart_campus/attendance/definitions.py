from __future__ import annotations

from ..records.definition import EntityDefinition
from .model import AttendanceRecord
from .schemas import AttendanceRecordCreate

# Attendance is high-volume device data; it is not written to the activity log.
ATTENDANCE_RECORD = EntityDefinition(
    name="attendance_record",
    table="attendance_records",
    model=AttendanceRecord,
    schema=AttendanceRecordCreate,
    json_columns=frozenset({"metadata"}),
)
