from __future__ import annotations

from ..records.definition import ActivityTemplate, EntityDefinition
from .model import Classroom, TimeSlot, TimetableSlot
from .schemas import ClassroomCreate, TimeSlotCreate, TimetableSlotCreate

CLASSROOM = EntityDefinition(
    name="classroom",
    table="classrooms",
    model=Classroom,
    schema=ClassroomCreate,
    json_columns=frozenset({"equipment"}),
    activity=ActivityTemplate(
        entity="classroom",
        describe=lambda c: f"Classroom {c.room_number}",
        metadata=lambda c: {"roomNumber": c.room_number, "capacity": c.capacity},
    ),
)

# Time slots are reference data; their changes are not audited.
TIME_SLOT = EntityDefinition(
    name="time_slot",
    table="time_slots",
    model=TimeSlot,
    schema=TimeSlotCreate,
)

TIMETABLE_SLOT = EntityDefinition(
    name="timetable_slot",
    table="timetable_slots",
    model=TimetableSlot,
    schema=TimetableSlotCreate,
    json_columns=frozenset({"student_groups"}),
    activity=ActivityTemplate(
        entity="timetable_slot",
        describe=lambda s: "Timetable slot",
        metadata=lambda s: {
            "courseId": s.course_id,
            "classroomId": s.classroom_id,
            "timeSlotId": s.time_slot_id,
        },
        create_action="timetable_updated",
    ),
)
