"""Write schemas for the academic structure.

Kept by hand next to ``database/schema.sql``: required fields mirror NOT NULL
columns without defaults, lengths mirror the VARCHAR sizes.
"""
from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FacultyCreate(_Schema):
    name: str = Field(..., min_length=1, max_length=255)
    institution_id: int
    dean_id: Optional[int] = None
    budget_allocation: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)


class DepartmentCreate(_Schema):
    name: str = Field(..., min_length=1, max_length=255)
    institution_id: int
    faculty_id: Optional[int] = None
    head_id: Optional[int] = None
    staff_count: int = Field(0, ge=0)


class AcademicStaffCreate(_Schema):
    user_id: int
    institution_id: int
    department_id: Optional[int] = None
    rank: Optional[str] = Field(None, max_length=100)
    specializations: Optional[List[str]] = None
    research_areas: Optional[List[str]] = None
    teaching_load: int = Field(0, ge=0)


class StudentCreate(_Schema):
    user_id: int
    institution_id: int
    student_id: str = Field(..., min_length=1, max_length=50)
    program: Optional[str] = Field(None, max_length=255)
    year_of_study: Optional[int] = Field(None, ge=0)
    academic_standing: str = Field("good", max_length=50)
    gpa: Optional[Decimal] = Field(None, max_digits=3, decimal_places=2)
    credits: int = Field(0, ge=0)


class CourseCreate(_Schema):
    course_code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=255)
    institution_id: int
    department_id: Optional[int] = None
    credits: int = Field(3, ge=0)
    hours_per_week: int = Field(3, ge=0)
    difficulty_weight: int = 5
    prerequisites: Optional[List[str]] = None
    lecturer_id: Optional[int] = None
    assessment_structure: Optional[Any] = None


class EnrollmentCreate(_Schema):
    institution_id: int
    student_id: int
    course_id: int
    semester: str = Field(..., min_length=1, max_length=20)
    academic_year: str = Field(..., min_length=1, max_length=20)
    enrollment_date: dt.datetime = Field(default_factory=dt.datetime.now)


class GradeRecordCreate(_Schema):
    institution_id: int
    student_id: int
    course_id: int
    semester: str = Field(..., min_length=1, max_length=20)
    academic_year: str = Field(..., min_length=1, max_length=20)
    grades: Optional[Dict[str, Any]] = None
    attendance: str = Field("100%", max_length=10)
