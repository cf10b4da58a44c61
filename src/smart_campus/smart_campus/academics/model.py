from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class Faculty:
    id: int
    name: str
    institution_id: int
    dean_id: Optional[int] = None
    budget_allocation: Optional[Decimal] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Department:
    id: int
    name: str
    institution_id: int
    faculty_id: Optional[int] = None
    head_id: Optional[int] = None
    staff_count: int = 0
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AcademicStaff:
    """Lecturer/teacher profile attached 1:1 to a User."""

    id: int
    user_id: int
    institution_id: int
    department_id: Optional[int] = None
    rank: Optional[str] = None
    specializations: Optional[list[str]] = None
    research_areas: Optional[list[str]] = None
    teaching_load: int = 0
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Student:
    """Student profile attached 1:1 to a User. ``student_id`` is the public, globally unique number."""

    id: int
    user_id: int
    institution_id: int
    student_id: str
    program: Optional[str] = None
    year_of_study: Optional[int] = None
    academic_standing: str = "good"
    gpa: Optional[Decimal] = None
    credits: int = 0
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Course:
    id: int
    course_code: str
    name: str
    institution_id: int
    department_id: Optional[int] = None
    credits: int = 3
    hours_per_week: int = 3
    difficulty_weight: int = 5
    prerequisites: Optional[list[str]] = None
    lecturer_id: Optional[int] = None
    assessment_structure: Optional[Any] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Enrollment:
    """A student taking a course in a given semester. ``student_id`` is the row id."""

    id: int
    institution_id: int
    student_id: int
    course_id: int
    semester: str
    academic_year: str
    enrollment_date: Optional[datetime] = None


@dataclass(frozen=True)
class GradeRecord:
    """Marks of one student in one course, e.g. ``{"midterm": 71, "final": 80}``."""

    id: int
    institution_id: int
    student_id: int
    course_id: int
    semester: str
    academic_year: str
    grades: Optional[dict[str, Any]] = None
    attendance: str = "100%"
    created_at: Optional[datetime] = None
