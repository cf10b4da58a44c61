from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Recommended user roles. The server stores roles as open strings."""

    ADMIN = "admin"
    TEACHER = "teacher"
    STAFF = "staff"
    STUDENT = "student"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in {r.value for r in cls}


class InstitutionType(str, Enum):
    HIGH_SCHOOL = "high-school"
    UNIVERSITY = "university"
    TECHNICAL = "technical"
    INTERNATIONAL = "international"


class EducationSystem(str, Enum):
    BRITISH = "british"
    AMERICAN = "american"
    IB = "ib"
    CUSTOM = "custom"


class AttendanceStatus(str, Enum):
    """Attendance status values stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"
